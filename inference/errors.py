"""
Error taxonomy for Gemini generation.

Every failure the orchestrator can surface derives from GenerationError:

  TransportError       timeout or network failure (retryable)
  GeminiAPIError       non-2xx answer from the API
  EmptyResponseError   2xx answer without usable text
  NoWorkingModelError  every version and candidate was exhausted

is_model_mismatch() decides whether a failure means "wrong model/version,
try the next candidate" or "stop now". It matches on the error message the
same way the upstream wording is known to look; anything it does not
recognise is treated as fatal.
"""

from typing import Iterable, Literal, Optional


TransportErrorKind = Literal["timeout", "network"]

_MISMATCH_MARKERS = (
    ": 404",
    '"code": 404',
    "NOT_FOUND",
    "not supported",
)


class GenerationError(Exception):
    """Base class for every generation failure."""
    pass


class TransportError(GenerationError):
    """No HTTP response was obtained (timeout, DNS, reset, protocol error)."""

    def __init__(self, kind: TransportErrorKind, message: str):
        self.kind = kind
        super().__init__(message)


class GeminiAPIError(GenerationError):
    """The API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class EmptyResponseError(GenerationError):
    """A 2xx generateContent answer carried no text."""
    pass


class NoWorkingModelError(GenerationError):
    """No API version / model combination produced text."""

    def __init__(self, versions: Iterable[str], last_error: Optional[BaseException] = None):
        self.versions = list(versions)
        self.last_error = last_error
        checked = ", ".join(self.versions)
        message = f"No working Gemini model found (checked versions: {checked})"
        if last_error is not None:
            message = f"{message}. Last error: {last_error}"
        super().__init__(message)


def is_model_mismatch(error: BaseException) -> bool:
    """
    True when the failure says the model/version pair is not usable.

    Mismatches are: HTTP 404, an explicit NOT_FOUND code, "not supported"
    phrasing, or an empty generateContent answer.
    """
    if isinstance(error, EmptyResponseError):
        return True
    if isinstance(error, GeminiAPIError) and error.status_code == 404:
        return True
    # Messages carry a clipped body; markers may sit further in
    texts = [str(error)]
    if isinstance(error, GeminiAPIError) and error.body:
        texts.append(error.body)
    return any(marker in text for text in texts for marker in _MISMATCH_MARKERS)
