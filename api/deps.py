"""
FastAPI Dependency Providers for the workout API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations.

Architecture:
- Settings are cached per-process (lru_cache)
- The text generator and pipeline are built per-request from settings

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_text_generator] = lambda: FakeWorkoutGenerator()
"""

from fastapi import Depends

from backend.settings import Settings, get_settings as _get_settings
from services.llm.client import OpenAIWorkoutGenerator, WorkoutTextGenerator
from services.workout_generator import WorkoutGenerator


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Generation Providers
# =============================================================================


def get_text_generator(
    settings: Settings = Depends(get_settings),
) -> WorkoutTextGenerator:
    """
    Get the text generator used to draft workouts.

    Args:
        settings: Application settings

    Returns:
        WorkoutTextGenerator implementation backed by OpenAI
    """
    return OpenAIWorkoutGenerator(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        temperature=settings.openai_temperature,
        timeout_seconds=settings.openai_timeout_seconds,
    )


def get_workout_generator(
    text_generator: WorkoutTextGenerator = Depends(get_text_generator),
) -> WorkoutGenerator:
    """
    Get the workout generation pipeline.

    Args:
        text_generator: Collaborator returning raw model text

    Returns:
        Configured WorkoutGenerator instance
    """
    return WorkoutGenerator(text_generator)
