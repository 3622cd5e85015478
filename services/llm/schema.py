"""
Generator-facing JSON Schema.

Derived from models.workout so the generator is asked for exactly the shape
the validator accepts: $defs for the nested entities, a oneOf with a
discriminator for the block union, additionalProperties false everywhere,
and the ISO-8601 pattern on every duration.
"""

import copy
from functools import lru_cache
from typing import Any, Dict

from models.workout import Workout

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

# Name under which the schema is registered with the chat completions API
SCHEMA_NAME = "Workout"


@lru_cache
def _build_workout_json_schema() -> Dict[str, Any]:
    schema = Workout.model_json_schema()
    return {"$schema": JSON_SCHEMA_DIALECT, **schema}


def workout_json_schema() -> Dict[str, Any]:
    """
    Get the JSON Schema (draft 2020-12) describing a Workout instance.

    The schema is built once per process; callers get a private copy.

    Returns:
        JSON Schema dictionary
    """
    return copy.deepcopy(_build_workout_json_schema())
