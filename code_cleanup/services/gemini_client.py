"""
Gemini client that asks the model to clean up a single source file
"""

import re
from typing import List, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..core.config import Settings
from ..core.constants import (
    DEFAULT_MAX_OUTPUT_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_SYSTEM_INSTRUCTION,
    DEFAULT_TEMPERATURE,
    GENERATION_BACKOFF_MAX_SECONDS,
    GENERATION_BACKOFF_MIN_SECONDS,
    GENERATION_MAX_ATTEMPTS,
    PROMPT_CODE_HEADER,
    PROMPT_FILENAME_HEADER,
    PROMPT_INSTRUCTION_HEADER,
    PROMPT_TASK,
)
from ..utils.errors import GenerationAPIError, InvalidResponseError
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)

CODE_FENCE_PATTERN = re.compile(r"^\s*```[\w.+-]*[ \t]*\n(?P<body>.*?)\n?```\s*$", re.DOTALL)


def strip_code_fence(text: str) -> str:
    """Remove a single markdown fence wrapping the whole text"""
    match = CODE_FENCE_PATTERN.match(text)
    if not match:
        return text
    body = match.group("body")
    return body if body.endswith("\n") else body + "\n"


class GeminiCleanupClient:
    """Sends code plus the cleanup instruction to Gemini and returns the cleaned text"""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        system_instruction: str = DEFAULT_SYSTEM_INSTRUCTION,
        temperature: float = DEFAULT_TEMPERATURE,
        max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
        strip_code_fences: bool = False,
        client: Optional[genai.Client] = None
    ):
        self.model = model
        self.system_instruction = system_instruction
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.strip_code_fences = strip_code_fences
        self.client = client or genai.Client(api_key=api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiCleanupClient":
        return cls(
            api_key=settings.google_api_key,
            model=settings.model,
            system_instruction=settings.system_instruction,
            temperature=settings.temperature,
            max_output_tokens=settings.max_output_tokens,
            strip_code_fences=settings.strip_code_fences,
        )

    def build_contents(self, code: str, filename: str) -> List[str]:
        """Prompt parts in the order the model receives them"""
        return [
            PROMPT_TASK,
            PROMPT_INSTRUCTION_HEADER,
            self.system_instruction,
            PROMPT_FILENAME_HEADER,
            filename,
            PROMPT_CODE_HEADER,
            code,
        ]

    def build_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
        )

    async def cleanup_code(self, code: str, filename: str) -> str:
        """
        Clean up one file's code

        Args:
            code: Original file contents
            filename: File basename, given to the model as context

        Returns:
            The model's text, used verbatim unless fence stripping is enabled

        Raises:
            GenerationAPIError: the API rejected the request or kept failing
            InvalidResponseError: the response carried no text
        """
        try:
            response = await self._generate(self.build_contents(code, filename))
        except genai_errors.APIError as e:
            logger.error(f"Error cleaning up code ({filename}): {e}")
            raise GenerationAPIError(
                e.message or str(e),
                status_code=e.code,
                model=self.model,
                original_exception=e
            ) from e
        except Exception as e:
            logger.error(f"Error cleaning up code ({filename}): {e}")
            raise

        text = self.extract_text(response)
        if text is None:
            logger.error(f"Error cleaning up code ({filename}): invalid response structure")
            raise InvalidResponseError(model=self.model)

        if self.strip_code_fences:
            text = strip_code_fence(text)
        return text

    @retry(
        stop=stop_after_attempt(GENERATION_MAX_ATTEMPTS),
        wait=wait_exponential(multiplier=1, min=GENERATION_BACKOFF_MIN_SECONDS, max=GENERATION_BACKOFF_MAX_SECONDS),
        retry=retry_if_exception_type(genai_errors.ServerError),
        reraise=True
    )
    async def _generate(self, contents: List[str]) -> types.GenerateContentResponse:
        """Single generate_content call with retry on server errors"""
        logger.debug(f"Requesting cleanup from {self.model}")
        return await self.client.aio.models.generate_content(
            model=self.model,
            contents=contents,
            config=self.build_config(),
        )

    @staticmethod
    def extract_text(response) -> Optional[str]:
        """Text of the first candidate, skipping thought parts; None when absent"""
        candidates = getattr(response, "candidates", None)
        if not candidates:
            return None

        content = candidates[0].content
        if content is None or not content.parts:
            return None

        texts = [part.text for part in content.parts if part.text and part.thought is not True]
        if not texts:
            return None
        return "".join(texts)
