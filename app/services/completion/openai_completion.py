"""OpenAI-compatible completion service."""
import logging
from typing import Optional

import openai
from openai import AsyncOpenAI

from app.services.completion.base import CompletionService
from app.services.ordering.errors import ExtractionRateLimited

logger = logging.getLogger(__name__)


class OpenAICompletionService(CompletionService):
    """Completion service backed by the chat completions API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        # Retries are owned by the extractor, so the SDK must not retry 429s itself
        self.client = client or AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        self.model = model

    async def complete(self, prompt: str) -> str:
        """Request a single completion and return its text."""
        logger.debug(f"[COMPLETION] Sending prompt ({len(prompt)} chars) to model {self.model}")
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=0,
            )
        except openai.RateLimitError as e:
            raise ExtractionRateLimited(f"Completion service rate limited: {e}") from e
        except openai.APIStatusError as e:
            if e.status_code == 429:
                raise ExtractionRateLimited(f"Completion service rate limited: {e}") from e
            raise

        content = response.choices[0].message.content or ""
        logger.debug(f"[COMPLETION] Received {len(content)} chars")
        return content

    async def close(self) -> None:
        await self.client.close()
