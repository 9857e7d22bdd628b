"""
Remote inference for the geography assistant.
The session only sees `await provider.ask(text) -> str`; prompts, credentials and the SDK stay here.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional

from google import genai

from atlas_config import GEMINI_MODEL, GEMINI_TEMPERATURE, SYSTEM_INSTRUCTION, generate_user_prompt

logger = logging.getLogger(__name__)


class ProviderUnavailable(RuntimeError):
    """Raised when no remote model is configured."""


class LLMProvider:
    """Base class for LLM providers"""

    def __init__(self, name: str, api_key: Optional[str]):
        self.name = name
        self.api_key = api_key
        self.is_available = bool(api_key)

    async def ask(self, question: str) -> str:
        """Return the model's reply text. Errors propagate to the caller."""
        raise NotImplementedError


class GeminiProvider(LLMProvider):
    """Google Gemini through the google-genai SDK"""

    def __init__(self, api_key: Optional[str], model: str = GEMINI_MODEL, client=None):
        super().__init__("Gemini", api_key)
        self.model = model
        self.client = client
        if self.client is None and self.is_available:
            self.client = genai.Client(api_key=api_key)
        self.is_available = self.client is not None

    def _generate(self, question: str) -> str:
        response = self.client.models.generate_content(
            model=self.model,
            contents=[{"role": "user", "parts": [{"text": generate_user_prompt(question)}]}],
            config={
                "system_instruction": SYSTEM_INSTRUCTION,
                "temperature": GEMINI_TEMPERATURE,
            },
        )
        return response.text or ""

    async def ask(self, question: str) -> str:
        if not self.is_available:
            raise ProviderUnavailable("Gemini client is not configured (GEMINI_API_KEY missing)")

        start_time = datetime.now()
        try:
            # The SDK call blocks; keep it off the view's event loop.
            reply = await asyncio.to_thread(self._generate, question)
        except Exception as e:
            error_msg = str(e)
            if "429" in error_msg or "RESOURCE_EXHAUSTED" in error_msg:
                logger.warning(f"Gemini quota exhausted: {error_msg}")
            else:
                logger.error(f"Gemini provider error: {error_msg}")
            raise

        response_time = (datetime.now() - start_time).total_seconds()
        logger.info(f"Gemini replied in {response_time:.2f}s ({len(reply)} chars)")
        return reply


def build_default_provider(api_key: Optional[str]) -> GeminiProvider:
    if not api_key:
        logger.warning("GEMINI_API_KEY not found in environment variables!")
        return GeminiProvider(None)
    try:
        provider = GeminiProvider(api_key)
        logger.info("Gemini client initialized successfully.")
        return provider
    except Exception as e:
        logger.error(f"Error initializing Gemini client: {e}")
        return GeminiProvider(None)
