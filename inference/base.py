from abc import ABC, abstractmethod
from .types import GenerationResult


class ModelBackend(ABC):
    """
    Abstract model boundary.
    HTTP handlers must depend ONLY on this interface.
    """

    @abstractmethod
    async def generate(self, api_key: str, prompt: str) -> GenerationResult:
        """Generate text for a prompt, or raise a GenerationError."""
        raise NotImplementedError
