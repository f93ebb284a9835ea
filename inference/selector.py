"""
Model/version auto-selection for Gemini.

Catalogs and deprecations change without notice, so every call rediscovers
what works instead of pinning one model:

  for version in (v1beta, v1):            iter_catalogs()
      list models (no retry, 15 s)         skip version on failure
      for model in ranked candidates:      iter_candidates()
          generateContent (3 retries)      mismatch -> next candidate
                                           anything else -> raise
  nothing worked -> NoWorkingModelError

Invariants:
- No state survives between calls (no cache of the winning pair)
- Strictly sequential: one catalog, one candidate, one attempt at a time
- The API key is never logged
"""

import logging
from typing import AsyncIterator, Iterator, List, Optional, Sequence, Tuple

from .base import ModelBackend
from .errors import GenerationError, NoWorkingModelError, is_model_mismatch
from .gemini import GeminiClient
from .types import ApiVersion, GenerationRequest, GenerationResult, ModelDescriptor

logger = logging.getLogger(__name__)

# Fast/cheap models known to work, tried first when the catalog has them
PREFERRED_MODELS: Tuple[str, ...] = (
    "gemini-2.5-flash",
    "gemini-2.0-flash",
    "gemini-2.0-flash-001",
    "gemini-2.0-flash-lite",
)

API_VERSIONS: Tuple[ApiVersion, ...] = (ApiVersion.PRIMARY, ApiVersion.SECONDARY)


def iter_candidates(
    models: Sequence[ModelDescriptor],
    preferred: Sequence[str] = PREFERRED_MODELS,
) -> Iterator[str]:
    """
    Yield model names to attempt, best first.

    Preferred names present in the catalog come first, then every other
    catalog name in catalog order. A name is skipped only when at least one
    model may generate and this one explicitly cannot.
    """
    available: List[str] = []
    for descriptor in models:
        name = descriptor.bare_name
        if name and name not in available:
            available.append(name)

    generate_capable = {d.bare_name for d in models if d.bare_name and d.may_generate}

    ranked = [name for name in preferred if name in available]
    ranked += [name for name in available if name not in ranked]

    for name in ranked:
        if generate_capable and name not in generate_capable:
            logger.debug(f"Skipping {name}: generateContent not supported")
            continue
        yield name


class ModelSelector(ModelBackend):
    """
    Finds a working (version, model) pair and returns its generated text.

    Args:
        client:           GeminiClient used for listing and generation
        preferred_models: Names tried before the rest of the catalog
        versions:         API versions in the order they are tried
    """

    def __init__(
        self,
        client: Optional[GeminiClient] = None,
        preferred_models: Sequence[str] = PREFERRED_MODELS,
        versions: Sequence[ApiVersion] = API_VERSIONS,
    ):
        self.client = client or GeminiClient()
        self.preferred_models = tuple(preferred_models)
        self.versions = tuple(versions)

    async def iter_catalogs(
        self, api_key: str
    ) -> AsyncIterator[Tuple[ApiVersion, List[ModelDescriptor]]]:
        """Yield (version, catalog) for each version whose listing succeeds."""
        for version in self.versions:
            try:
                models = await self.client.list_models(version, api_key)
            except GenerationError as e:
                logger.warning(
                    f"listModels failed ({version.value}): {e}",
                    extra={"api_version": version.value},
                )
                continue
            logger.debug(f"Catalog {version.value}: {len(models)} models")
            yield version, models

    async def generate(self, api_key: str, prompt: str) -> GenerationResult:
        """
        Generate text with the first working model.

        Raises:
            GenerationError: a fatal failure (auth, quota, bad request,
                             exhausted transient errors) from any candidate
            NoWorkingModelError: every version and candidate was a mismatch
        """
        request = GenerationRequest(prompt=prompt, api_key=api_key)
        last_mismatch: Optional[GenerationError] = None

        async for version, models in self.iter_catalogs(api_key):
            for model in iter_candidates(models, self.preferred_models):
                try:
                    text = await self.client.generate_content(version, model, request)
                except GenerationError as e:
                    if not is_model_mismatch(e):
                        logger.error(
                            f"Gemini generation failed on {version.value}/{model}: {e}",
                            extra={"api_version": version.value, "model": model},
                        )
                        raise
                    logger.warning(
                        f"Model mismatch on {version.value}/{model}, trying next: {e}",
                        extra={"api_version": version.value, "model": model},
                    )
                    last_mismatch = e
                    continue

                logger.info(
                    f"Generated with {version.value}/{model}",
                    extra={"api_version": version.value, "model": model},
                )
                return GenerationResult(version=version, model=model, text=text)

        raise NoWorkingModelError([v.value for v in self.versions], last_mismatch)
