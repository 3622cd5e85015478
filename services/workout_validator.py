"""
Schema validation for candidate workouts.

Validates a repaired candidate against the Workout model and reports every
failure as a structured violation (path, code, message) instead of raising.
The rules come entirely from models.workout.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from models.workout import BLOCK_TYPES, Workout

logger = logging.getLogger(__name__)


class ViolationCode(str, Enum):
    """Machine-readable kind of a schema violation."""

    INVALID_TYPE = "invalid_type"
    MISSING = "missing"
    INVALID_ENUM = "invalid_enum"
    UNRECOGNIZED_KEY = "unrecognized_key"
    PATTERN_MISMATCH = "pattern_mismatch"
    INVALID_UNION = "invalid_union"
    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    INVALID_VALUE = "invalid_value"


# pydantic error types -> violation codes (anything ending in "_type" is a type error)
ERROR_TYPE_CODES: Dict[str, ViolationCode] = {
    "missing": ViolationCode.MISSING,
    "extra_forbidden": ViolationCode.UNRECOGNIZED_KEY,
    "literal_error": ViolationCode.INVALID_ENUM,
    "enum": ViolationCode.INVALID_ENUM,
    "string_pattern_mismatch": ViolationCode.PATTERN_MISMATCH,
    "union_tag_invalid": ViolationCode.INVALID_UNION,
    "union_tag_not_found": ViolationCode.INVALID_UNION,
    "too_short": ViolationCode.TOO_SMALL,
    "greater_than": ViolationCode.TOO_SMALL,
    "greater_than_equal": ViolationCode.TOO_SMALL,
    "string_too_short": ViolationCode.TOO_SMALL,
    "too_long": ViolationCode.TOO_BIG,
    "less_than": ViolationCode.TOO_BIG,
    "less_than_equal": ViolationCode.TOO_BIG,
    "string_too_long": ViolationCode.TOO_BIG,
    "int_from_float": ViolationCode.INVALID_TYPE,
    "int_parsing": ViolationCode.INVALID_TYPE,
    "float_parsing": ViolationCode.INVALID_TYPE,
    "finite_number": ViolationCode.INVALID_VALUE,
}


@dataclass(frozen=True)
class Violation:
    """A single way a candidate document failed validation."""

    path: str
    code: ViolationCode
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "code": self.code.value, "message": self.message}


@dataclass(frozen=True)
class ValidationOutcome:
    """Either a typed workout or the list of violations that prevented one."""

    workout: Optional[Workout] = None
    violations: List[Violation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.workout is not None and not self.violations


def validate_workout(candidate: Any) -> ValidationOutcome:
    """
    Validate a candidate document against the Workout model.

    This never raises: every failure is returned as a violation, in the
    order the validator encountered them.

    Args:
        candidate: Repaired, still untyped, document

    Returns:
        ValidationOutcome with the frozen Workout on success, or violations
    """
    try:
        workout = Workout.model_validate(candidate)
    except ValidationError as e:
        violations = [_to_violation(error) for error in e.errors()]
        logger.debug(f"Workout failed validation with {len(violations)} violation(s)")
        return ValidationOutcome(violations=violations)

    return ValidationOutcome(workout=workout)


def _to_violation(error: Dict[str, Any]) -> Violation:
    """Convert one pydantic error dict into a Violation."""
    return Violation(
        path=format_path(error.get("loc", ())),
        code=classify_error_type(error.get("type", "")),
        message=error.get("msg", "Invalid value"),
    )


def classify_error_type(error_type: str) -> ViolationCode:
    """Map a pydantic error type onto a ViolationCode."""
    if error_type in ERROR_TYPE_CODES:
        return ERROR_TYPE_CODES[error_type]
    if error_type.endswith("_type"):
        return ViolationCode.INVALID_TYPE
    return ViolationCode.INVALID_VALUE


def format_path(loc: Sequence[Union[str, int]]) -> str:
    """
    Dot-join an error location into a document path.

    pydantic inserts the discriminator tag after the block index
    (blocks.0.amrap.duration); it is dropped so the path mirrors the
    document itself (blocks.0.duration).
    """
    parts = list(loc)
    if (
        len(parts) >= 3
        and parts[0] == "blocks"
        and isinstance(parts[1], int)
        and parts[2] in BLOCK_TYPES
    ):
        del parts[2]
    return ".".join(str(part) for part in parts)
