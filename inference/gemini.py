"""
Gemini REST surfaces: ListModels and generateContent.

Both authenticate with the x-goog-api-key header so the key never lands in
a URL (and therefore never in an access log or exception message).
"""

import asyncio
import logging
from typing import List, Optional

from pydantic import ValidationError

from .errors import EmptyResponseError, GeminiAPIError
from .retry import BASE_DELAY_MS, GENERATE_RETRIES, LIST_RETRIES, Retrier, SleepFn
from .transport import HttpTransport
from .types import (
    ApiVersion,
    GenerateContentResponse,
    GenerationRequest,
    ModelCatalog,
    ModelDescriptor,
)

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com"
LIST_TIMEOUT_S = 15.0
GENERATE_TIMEOUT_S = 30.0

# Upstream error bodies can be large HTML pages
_MAX_BODY_IN_ERROR = 500


def _clip(body: str) -> str:
    if len(body) <= _MAX_BODY_IN_ERROR:
        return body
    return body[:_MAX_BODY_IN_ERROR] + "..."


class GeminiClient:
    """
    Thin async client for the two Gemini endpoints the selector needs.

    Listing and generation share one Retrier implementation, configured
    with different retry budgets and timeouts.
    """

    def __init__(
        self,
        transport: Optional[HttpTransport] = None,
        base_url: str = GEMINI_BASE_URL,
        list_timeout_s: float = LIST_TIMEOUT_S,
        generate_timeout_s: float = GENERATE_TIMEOUT_S,
        list_retries: int = LIST_RETRIES,
        generate_retries: int = GENERATE_RETRIES,
        base_delay_ms: int = BASE_DELAY_MS,
        sleep: SleepFn = asyncio.sleep,
    ):
        self.transport = transport or HttpTransport()
        self.base_url = base_url.rstrip("/")
        self.list_timeout_s = list_timeout_s
        self.generate_timeout_s = generate_timeout_s
        self._list_retrier = Retrier(list_retries, base_delay_ms, sleep)
        self._generate_retrier = Retrier(generate_retries, base_delay_ms, sleep)

    def models_url(self, version: ApiVersion) -> str:
        return f"{self.base_url}/{version.value}/models"

    def generate_url(self, version: ApiVersion, model: str) -> str:
        return f"{self.base_url}/{version.value}/models/{model}:generateContent"

    async def list_models(self, version: ApiVersion, api_key: str) -> List[ModelDescriptor]:
        """
        Fetch the model catalog for one API version.

        Raises:
            TransportError: timeout or network failure
            GeminiAPIError: non-2xx status or an unreadable body
        """
        url = self.models_url(version)
        response = await self._list_retrier.call(
            lambda: self.transport.call(
                "GET",
                url,
                headers={"x-goog-api-key": api_key},
                timeout=self.list_timeout_s,
            )
        )

        if not response.ok:
            raise GeminiAPIError(
                f"ListModels failed ({version.value}): "
                f"{response.status_code} {_clip(response.raw_body)}",
                status_code=response.status_code,
                body=response.raw_body,
            )

        try:
            catalog = ModelCatalog.model_validate_json(response.raw_body)
        except ValidationError as e:
            raise GeminiAPIError(
                f"ListModels returned an unreadable catalog ({version.value}): {e}",
                status_code=response.status_code,
                body=response.raw_body,
            ) from e

        models: List[ModelDescriptor] = []
        for raw in catalog.models:
            try:
                models.append(ModelDescriptor.model_validate(raw))
            except ValidationError:
                logger.warning(
                    f"Skipping malformed catalog entry ({version.value})",
                    extra={"api_version": version.value},
                )
        return models

    async def generate_content(
        self,
        version: ApiVersion,
        model: str,
        request: GenerationRequest,
    ) -> str:
        """
        Run a single-turn generateContent call and return the first text part.

        Raises:
            TransportError: timeout or network failure after all retries
            GeminiAPIError: non-2xx status after all retries
            EmptyResponseError: 2xx answer without text
        """
        url = self.generate_url(version, model)
        payload = request.to_payload()
        response = await self._generate_retrier.call(
            lambda: self.transport.call(
                "POST",
                url,
                headers={
                    "x-goog-api-key": request.api_key,
                    "Content-Type": "application/json",
                },
                json_body=payload,
                timeout=self.generate_timeout_s,
            )
        )

        if not response.ok:
            raise GeminiAPIError(
                f"Gemini generateContent failed ({version.value}/{model}): "
                f"{response.status_code} {_clip(response.raw_body)}",
                status_code=response.status_code,
                body=response.raw_body,
            )

        try:
            text = GenerateContentResponse.model_validate_json(response.raw_body).first_text()
        except ValidationError:
            text = None

        if not isinstance(text, str) or not text.strip():
            raise EmptyResponseError(
                f"Gemini response is empty ({version.value}/{model}). "
                f"raw={_clip(response.raw_body)}"
            )

        return text
