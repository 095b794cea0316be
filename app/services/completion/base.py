"""Completion service interface."""
from abc import ABC, abstractmethod


class CompletionService(ABC):
    """Abstract base class for text completion backends."""

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """
        Generate a free-form text completion for a prompt.

        Raises:
            ExtractionRateLimited: if the backend refuses due to rate limits.
            Exception: any other backend failure.
        """
        pass
