"""
Workout generation router.

This router provides the endpoint for AI-powered workout generation:
- Generate one schema-validated workout from duration, target and equipment

Pipeline failures are not caught here; they propagate as
WorkoutGenerationError subclasses and are rendered by the handler
registered in backend.main.
"""

from fastapi import APIRouter, Depends

from api.deps import get_workout_generator
from models.generation import (
    ErrorResponse,
    GenerateWorkoutRequest,
    SchemaViolationResponse,
)
from models.workout import Workout
from services.workout_generator import WorkoutGenerator

router = APIRouter(
    prefix="/workout",
    tags=["Workouts"],
)


@router.post(
    "",
    response_model=Workout,
    responses={
        422: {
            "model": SchemaViolationResponse,
            "description": "Generated workout failed schema validation",
        },
        502: {
            "model": ErrorResponse,
            "description": "Upstream model error or non-JSON model output",
        },
    },
)
async def generate_workout(
    request: GenerateWorkoutRequest,
    generator: WorkoutGenerator = Depends(get_workout_generator),
):
    """
    Generate a workout using AI.

    The model output is parsed, repaired (duration shorthands such as
    "20:00" become "PT20M") and validated before anything is returned.

    Args:
        request: Generation parameters:
            - minutes: Approximate duration (5-120)
            - target: Type of workout, muscle groups, or goal
            - equipment: Equipment available
            - notes: Optional preferences

    Returns:
        The validated Workout document

    Raises:
        UpstreamError: 502 when the model call fails
        MalformedOutputError: 502 when the model output is not JSON
        SchemaViolationError: 422 with the list of violations
    """
    return await generator.generate(request)
