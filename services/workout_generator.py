"""
Workout generation pipeline.

Turns a generation request into a validated Workout:

1. Invoke   - one call to the text generator (UpstreamError on failure)
2. Parse    - json.loads the raw text (MalformedOutputError on failure)
3. Repair   - heal duration shorthands in place (never fails)
4. Validate - check against the Workout model (SchemaViolationError)
5. Success  - return the frozen Workout

States only move forward. There are no retries: a single upstream call, a
single repair pass and a single validation pass per request.
"""

import json
import logging

from application.exceptions import (
    MalformedOutputError,
    SchemaViolationError,
    UpstreamError,
)
from models.generation import GenerateWorkoutRequest
from models.workout import Workout
from services.llm.client import WorkoutTextGenerator
from services.repair import repair_workout
from services.workout_validator import validate_workout

logger = logging.getLogger(__name__)


class WorkoutGenerator:
    """
    Service for generating workouts with a text model.

    Holds no per-request state, so one instance can serve concurrent
    requests.
    """

    def __init__(self, text_generator: WorkoutTextGenerator):
        """
        Initialize the workout generator.

        Args:
            text_generator: Collaborator that returns raw model text
        """
        self._text_generator = text_generator

    async def generate(self, request: GenerateWorkoutRequest) -> Workout:
        """
        Generate one workout and guarantee it is well-formed.

        Args:
            request: Validated generation parameters

        Returns:
            The validated, immutable Workout

        Raises:
            UpstreamError: If the text generator call fails
            MalformedOutputError: If the generator output is not JSON
            SchemaViolationError: If the repaired output does not fit the model
        """
        logger.info(
            f"Generating workout: minutes={request.minutes}, "
            f"target={request.target!r}, equipment={request.equipment!r}"
        )

        raw = await self._invoke(request)
        candidate = self._parse(raw)
        candidate = repair_workout(candidate)

        outcome = validate_workout(candidate)
        if not outcome.is_valid:
            logger.warning(
                f"Generated workout failed validation with "
                f"{len(outcome.violations)} violation(s)"
            )
            raise SchemaViolationError(outcome.violations)

        workout = outcome.workout
        logger.info(f"Generated workout {workout.id!r} with {len(workout.blocks)} block(s)")
        return workout

    async def _invoke(self, request: GenerateWorkoutRequest) -> str:
        """Call the text generator once, normalizing failures to UpstreamError."""
        try:
            raw = await self._text_generator.generate(request)
        except UpstreamError as e:
            logger.error(f"Text generator call failed: {e.detail}")
            raise
        except Exception as e:
            logger.exception(f"Unexpected text generator failure: {e}")
            raise UpstreamError(str(e) or type(e).__name__) from e

        if not isinstance(raw, str):
            raise UpstreamError(
                f"Text generator returned {type(raw).__name__}, expected str"
            )
        return raw

    def _parse(self, raw: str):
        """Parse raw text as JSON."""
        # ValueError covers JSONDecodeError and oversized integer literals;
        # RecursionError comes from pathologically deep nesting
        try:
            return json.loads(raw)
        except (ValueError, RecursionError) as e:
            logger.error(f"Model returned non-JSON ({e}): {raw!r}")
            raise MalformedOutputError(raw, reason=str(e)) from e
