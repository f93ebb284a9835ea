from .base import ModelBackend
from .types import ApiVersion, GenerationResult


class StubModelBackend(ModelBackend):
    """
    Deterministic fake model for testing and CI.

    Never touches the network and never fails silently.
    """

    model_name = "stub-model"

    async def generate(self, api_key: str, prompt: str) -> GenerationResult:
        """
        Echo a fixed response that mentions the start of the prompt.

        Args:
            api_key: Ignored
            prompt:  Prompt text

        Returns:
            GenerationResult on the primary version with the stub model name
        """
        preview = " ".join(prompt.split())[:60]
        return GenerationResult(
            version=ApiVersion.PRIMARY,
            model=self.model_name,
            text=f"This is a stubbed response for: {preview}",
        )
