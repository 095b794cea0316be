"""Order extraction service."""
import asyncio
import json
import logging
import re
from typing import Any, Awaitable, Callable, Optional

from app.services.completion.base import CompletionService
from app.services.ordering.errors import (
    ExtractionExhausted,
    ExtractionFailed,
    ExtractionRateLimited,
)
from app.services.ordering.prompt import get_extraction_prompt
from app.services.pricing.catalog import PriceCatalog

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def clean_completion_text(text: str) -> str:
    """
    Reduce a completion to its JSON payload candidate.

    Strips markdown code fences, then keeps everything from the first '{'
    to the last '}'. Falls back to the whole trimmed text when there are
    no braces.
    """
    text = _FENCE_RE.sub("", text.strip()).strip()
    match = _OBJECT_RE.search(text)
    return match.group(0) if match else text


class OrderExtractor:
    """Service for turning free-text order messages into order data."""

    def __init__(
        self,
        completion_service: CompletionService,
        price_catalog: PriceCatalog,
        max_attempts: int = 3,
        retry_delay: float = 5.0,
        sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
    ):
        self.completion_service = completion_service
        self.price_catalog = price_catalog
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._sleep = sleep or asyncio.sleep

    async def extract(self, message: str) -> Any:
        """
        Extract order data from a message.

        Only rate limiting is retried. The decoded JSON is returned as-is;
        callers validate it with Order.from_payload.

        Raises:
            ExtractionExhausted: every attempt was rate limited.
            ExtractionFailed: the service failed otherwise, or the output is not JSON.
        """
        prompt = get_extraction_prompt(message, self.price_catalog.get_prompt_text())

        for attempt in range(1, self.max_attempts + 1):
            logger.info(f"[EXTRACTOR] Attempt {attempt}/{self.max_attempts} - message length: {len(message)}")
            try:
                text = await self.completion_service.complete(prompt)
            except ExtractionRateLimited:
                logger.warning(f"[EXTRACTOR] Completion service rate limited on attempt {attempt}")
                if attempt < self.max_attempts:
                    logger.info(f"[EXTRACTOR] Retrying in {self.retry_delay:g} seconds")
                    await self._sleep(self.retry_delay)
                continue
            except Exception as e:
                logger.error(
                    f"[EXTRACTOR] Completion service error - {type(e).__name__}: {str(e)}",
                    exc_info=True,
                )
                raise ExtractionFailed(f"Completion service error: {str(e)}") from e

            candidate = clean_completion_text(text)
            try:
                payload = json.loads(candidate)
            except json.JSONDecodeError as e:
                logger.error(f"[EXTRACTOR] Completion output is not valid JSON: {text!r}")
                raise ExtractionFailed("Completion service returned invalid JSON") from e

            logger.info(f"[EXTRACTOR] Extracted order data on attempt {attempt}")
            return payload

        raise ExtractionExhausted("Completion service exhausted or returned invalid JSON.")
