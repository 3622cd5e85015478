"""
Services package for the workout API.

- duration: ISO-8601 duration normalization
- repair: best-effort healing of parsed generator output
- workout_validator: schema validation with structured violations
- workout_generator: the request pipeline
- llm: prompts, JSON Schema and the OpenAI text generator
"""
