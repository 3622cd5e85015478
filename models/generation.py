"""
Request/response models for workout generation.

These models define the API contract of POST /workout. The success body is
the Workout document itself (models.workout); failures use the error bodies
below.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from core.constants import MAX_NOTES_LENGTH, MAX_WORKOUT_MINUTES, MIN_WORKOUT_MINUTES


class GenerateWorkoutRequest(BaseModel):
    """Request model for generating a single workout."""

    minutes: int = Field(
        ge=MIN_WORKOUT_MINUTES,
        le=MAX_WORKOUT_MINUTES,
        description="Approximate workout duration in minutes",
    )
    target: str = Field(
        min_length=1,
        description="Type of workout, muscle groups, or goal (e.g., 'full body')",
    )
    equipment: str = Field(
        min_length=1,
        description="Equipment available (e.g., 'none', 'dumbbells, pull-up bar')",
    )
    notes: Optional[str] = Field(
        None,
        max_length=MAX_NOTES_LENGTH,
        description="Additional preferences or constraints for the workout",
    )

    @field_validator("target", "equipment")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject values that are only whitespace."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class ErrorResponse(BaseModel):
    """Body returned when the generator fails or returns unparseable text."""

    error: str = Field(description="Failure kind")
    detail: Optional[str] = Field(None, description="Upstream failure detail")


class ViolationResponse(BaseModel):
    """A single schema violation as reported to the caller."""

    path: str = Field(description="Dot-joined location from the document root")
    code: str = Field(description="Machine-readable violation kind")
    message: str = Field(description="Human-readable explanation")


class SchemaViolationResponse(BaseModel):
    """Body returned when the generated document fails validation."""

    error: str = Field(description="Always 'Schema validation failed'")
    issues: List[ViolationResponse] = Field(description="Every violation found")
