"""Models package for the workout API."""

from models.workout import (
    AmrapBlock,
    Block,
    BLOCK_MODELS,
    BLOCK_TYPES,
    EmomBlock,
    EmomSlot,
    ForTimeBlock,
    Load,
    Movement,
    Score,
    SetScheme,
    SetsBlock,
    SupersetBlock,
    Workout,
)
from models.generation import (
    ErrorResponse,
    GenerateWorkoutRequest,
    SchemaViolationResponse,
    ViolationResponse,
)

__all__ = [
    "AmrapBlock",
    "Block",
    "BLOCK_MODELS",
    "BLOCK_TYPES",
    "EmomBlock",
    "EmomSlot",
    "ForTimeBlock",
    "Load",
    "Movement",
    "Score",
    "SetScheme",
    "SetsBlock",
    "SupersetBlock",
    "Workout",
    "ErrorResponse",
    "GenerateWorkoutRequest",
    "SchemaViolationResponse",
    "ViolationResponse",
]
