"""Abstract LLM provider interface.

All provider implementations must inherit from this class.
Business logic never imports a concrete provider directly.
The concrete provider is instantiated once in the FastAPI lifespan
and injected everywhere via Depends().
"""

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """Abstract base class for generative text providers."""

    @abstractmethod
    async def generate_content(
        self,
        prompt: str,
        model_override: str | None = None,
    ) -> str:
        """Send a prompt and return the provider's raw text reply.

        Args:
            prompt: The full prompt text.
            model_override: Model name to use instead of the configured default.

        Returns:
            Non-empty reply text, trimmed.

        Raises:
            ProviderError: One of its subclasses for a missing credential,
                network failure, timeout, non-2xx status, unparseable body,
                or a reply with no text.
        """
        ...

    async def aclose(self) -> None:
        """Release pooled connections. Default: nothing to release."""
        return None
