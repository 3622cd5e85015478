"""
Fake implementations for testing.

This package provides deterministic fakes for the text generator so the
pipeline and the HTTP app can be tested without calling OpenAI.
"""

from tests.fakes.text_generator import (
    DEFAULT_WORKOUT,
    FailingWorkoutGenerator,
    FakeWorkoutGenerator,
)

__all__ = [
    "DEFAULT_WORKOUT",
    "FailingWorkoutGenerator",
    "FakeWorkoutGenerator",
]
