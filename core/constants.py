"""
Shared constants.

This module has no dependencies on models or services to avoid circular imports.
"""

# Bounds for the requested session length, in minutes
MIN_WORKOUT_MINUTES = 5
MAX_WORKOUT_MINUTES = 120

# Maximum length for a free-text field interpolated into the generation prompt
MAX_PROMPT_FIELD_LENGTH = 200

# Maximum length for the optional notes/preferences field
MAX_NOTES_LENGTH = 500
