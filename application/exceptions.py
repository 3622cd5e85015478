"""
Application-layer exceptions.

These are the terminal failure kinds of workout generation. Each one knows
the HTTP status and response body it maps to; the app factory registers a
single handler for WorkoutGenerationError that renders them.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from services.workout_validator import Violation


class WorkoutGenerationError(Exception):
    """Base class for failures while producing a workout."""

    http_status: int = 500
    error_message: str = "Workout generation failed"

    def to_response(self) -> Dict[str, Any]:
        """Build the JSON body returned to the caller."""
        return {"error": self.error_message}


class UpstreamError(WorkoutGenerationError):
    """The text generator call failed or returned a non-success status.

    Not our fault and never retried here; surfaced as a 502.
    """

    http_status = 502
    error_message = "Upstream model error"

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def to_response(self) -> Dict[str, Any]:
        return {"error": self.error_message, "detail": self.detail}


class MalformedOutputError(WorkoutGenerationError):
    """The generator returned text that is not parseable as JSON.

    The raw text is kept for logging only and is never sent to the caller.
    """

    http_status = 502
    error_message = "Model did not return valid JSON"

    def __init__(self, raw: str, reason: Optional[str] = None):
        super().__init__(reason or self.error_message)
        self.raw = raw
        self.reason = reason


class SchemaViolationError(WorkoutGenerationError):
    """Parsed and repaired output does not conform to the Workout model."""

    http_status = 422
    error_message = "Schema validation failed"

    def __init__(self, violations: List["Violation"]):
        super().__init__(f"{len(violations)} schema violation(s)")
        self.violations = violations

    def to_response(self) -> Dict[str, Any]:
        return {
            "error": self.error_message,
            "issues": [violation.to_dict() for violation in self.violations],
        }
