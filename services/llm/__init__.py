"""
LLM integration module for workout generation.

This module provides the generator-facing JSON Schema, the prompts, and the
OpenAI-backed text generator used by the request pipeline.
"""

from services.llm.client import OpenAIWorkoutGenerator, WorkoutTextGenerator
from services.llm.prompts import WORKOUT_SYSTEM_PROMPT, build_workout_user_prompt
from services.llm.schema import workout_json_schema

__all__ = [
    "OpenAIWorkoutGenerator",
    "WorkoutTextGenerator",
    "WORKOUT_SYSTEM_PROMPT",
    "build_workout_user_prompt",
    "workout_json_schema",
]
