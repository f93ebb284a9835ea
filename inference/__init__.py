"""
Model boundary layer for text generation.

This package hides how a working Gemini model is found. Handlers call
ModelBackend.generate(api_key, prompt) and get text back or an exception.

Supported backends:
- StubModelBackend: Deterministic fake model (default for CI/tests)
- ModelSelector: Gemini REST with model discovery, fallback and retry

Layers under ModelSelector:
- HttpTransport: one request, hard timeout, typed transport errors
- Retrier: bounded exponential backoff for 429/5xx and transport errors
- GeminiClient: ListModels and generateContent endpoints

Example usage:
    from inference import ModelSelector

    backend = ModelSelector()
    result = await backend.generate(api_key, "Summarize this article ...")
    print(result.version, result.model, result.text)
"""

from .types import (
    ApiVersion,
    CallOutcome,
    Capability,
    GenerationRequest,
    GenerationResult,
    HttpResponse,
    ModelDescriptor,
    OutcomeStatus,
    RETRYABLE_STATUSES,
)
from .errors import (
    EmptyResponseError,
    GeminiAPIError,
    GenerationError,
    NoWorkingModelError,
    TransportError,
    is_model_mismatch,
)
from .base import ModelBackend
from .transport import HttpTransport
from .retry import Retrier, backoff_delay_ms
from .gemini import GeminiClient
from .selector import ModelSelector, PREFERRED_MODELS, iter_candidates
from .stub import StubModelBackend

__all__ = [
    "ApiVersion",
    "CallOutcome",
    "Capability",
    "GenerationRequest",
    "GenerationResult",
    "HttpResponse",
    "ModelDescriptor",
    "OutcomeStatus",
    "RETRYABLE_STATUSES",
    "EmptyResponseError",
    "GeminiAPIError",
    "GenerationError",
    "NoWorkingModelError",
    "TransportError",
    "is_model_mismatch",
    "ModelBackend",
    "HttpTransport",
    "Retrier",
    "backoff_delay_ms",
    "GeminiClient",
    "ModelSelector",
    "PREFERRED_MODELS",
    "iter_candidates",
    "StubModelBackend",
]
