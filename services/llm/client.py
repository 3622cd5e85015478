"""
OpenAI client wrapper for workout generation.

Provides the WorkoutTextGenerator protocol (the collaborator the pipeline
depends on) and OpenAIWorkoutGenerator, its chat-completions implementation.
The generator returns raw text and nothing else: parsing, repair and
validation happen in services.workout_generator.
"""

import logging
from typing import Optional, Protocol

from openai import APIError, APIStatusError, AsyncOpenAI

from application.exceptions import UpstreamError
from models.generation import GenerateWorkoutRequest
from services.llm.prompts import WORKOUT_SYSTEM_PROMPT, build_workout_user_prompt
from services.llm.schema import SCHEMA_NAME, workout_json_schema

logger = logging.getLogger(__name__)


class WorkoutTextGenerator(Protocol):
    """Anything that turns a generation request into raw model text."""

    async def generate(self, request: GenerateWorkoutRequest) -> str:
        """Return raw text, or raise UpstreamError."""
        ...


class OpenAIWorkoutGenerator:
    """
    OpenAI-powered workout text generator.

    Sends the system prompt, the rendered user prompt and the Workout JSON
    Schema as a json_schema response format, and returns the message content
    untouched. Makes exactly one request per call; retries, if wanted, belong
    around this class, not inside it.
    """

    DEFAULT_MODEL = "gpt-4o-mini"
    DEFAULT_TEMPERATURE = 0.6

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout_seconds: Optional[float] = None,
        max_retries: int = 0,
    ):
        """
        Initialize the generator.

        Args:
            api_key: OpenAI API key; a missing key fails at call time
            model: Model to use (default: gpt-4o-mini)
            temperature: Sampling temperature (default: 0.6)
            timeout_seconds: Transport timeout for the request
            max_retries: Transport-level retries in the SDK (default: none)
        """
        self._model = model
        self._temperature = temperature
        self._client: Optional[AsyncOpenAI] = None
        if api_key:
            self._client = AsyncOpenAI(
                api_key=api_key,
                timeout=timeout_seconds,
                max_retries=max_retries,
            )

    async def generate(self, request: GenerateWorkoutRequest) -> str:
        """
        Ask the model for one workout as JSON text.

        Args:
            request: Validated generation parameters

        Returns:
            Raw message content (expected to be JSON with no markup)

        Raises:
            UpstreamError: If the key is missing, the call fails, or the
                response carries no content
        """
        if self._client is None:
            raise UpstreamError("Missing OPENAI_API_KEY (set it in the environment or .env)")

        user_prompt = build_workout_user_prompt(
            minutes=request.minutes,
            target=request.target,
            equipment=request.equipment,
            notes=request.notes,
        )

        logger.debug(f"Calling {self._model} for a {request.minutes} minute workout")

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": WORKOUT_SYSTEM_PROMPT},
                    {"role": "user", "content": user_prompt},
                ],
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": SCHEMA_NAME,
                        "schema": workout_json_schema(),
                    },
                },
                temperature=self._temperature,
            )
        except APIStatusError as e:
            raise UpstreamError(
                f"OpenAI error {e.status_code}: {e.message}",
                status_code=e.status_code,
            ) from e
        except APIError as e:
            raise UpstreamError(f"OpenAI request failed: {e.message}") from e

        content = None
        if response.choices:
            content = response.choices[0].message.content

        if not content or not isinstance(content, str):
            raise UpstreamError("No JSON content in response")

        return content
