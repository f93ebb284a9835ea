"""
Bounded exponential-backoff retry around a transport call.

Wait before attempt i (i >= 1) is base_delay_ms * 2**(i-1):
800 ms, 1.6 s, 3.2 s with the defaults. No jitter, no cap.
"""

import asyncio
import logging
from typing import Awaitable, Callable

from .errors import TransportError
from .types import CallOutcome, HttpResponse

logger = logging.getLogger(__name__)

BASE_DELAY_MS = 800
GENERATE_RETRIES = 3
LIST_RETRIES = 0

AttemptFn = Callable[[], Awaitable[HttpResponse]]
SleepFn = Callable[[float], Awaitable[None]]


def backoff_delay_ms(attempt: int, base_delay_ms: int = BASE_DELAY_MS) -> int:
    """Wait in milliseconds before the given 0-indexed attempt."""
    if attempt < 1:
        return 0
    return base_delay_ms * 2 ** (attempt - 1)


class Retrier:
    """
    Repeats an attempt while its outcome is retryable.

    Args:
        retries:       Extra attempts after the first one
        base_delay_ms: Backoff base
        sleep:         Awaitable sleep taking seconds (injectable for tests)
    """

    def __init__(
        self,
        retries: int = GENERATE_RETRIES,
        base_delay_ms: int = BASE_DELAY_MS,
        sleep: SleepFn = asyncio.sleep,
    ):
        if retries < 0:
            raise ValueError("retries must be >= 0")
        self.retries = retries
        self.base_delay_ms = base_delay_ms
        self._sleep = sleep

    async def call(self, attempt_fn: AttemptFn) -> HttpResponse:
        """
        Run attempt_fn until a terminal outcome.

        The last attempt's response is returned as-is even when retryable;
        a TransportError on the last attempt is re-raised.
        """
        last_attempt = self.retries
        attempt = 0
        while True:
            if attempt > 0:
                await self._sleep(backoff_delay_ms(attempt, self.base_delay_ms) / 1000)

            try:
                response = await attempt_fn()
                outcome = CallOutcome.from_response(response)
            except TransportError as e:
                outcome = CallOutcome.from_transport_error(e)

            if not outcome.retryable or attempt == last_attempt:
                if outcome.error is not None:
                    raise outcome.error
                return response

            wait_ms = backoff_delay_ms(attempt + 1, self.base_delay_ms)
            if outcome.error is not None:
                logger.warning(
                    f"Transport error ({outcome.error.kind}), retrying in {wait_ms}ms: {outcome.error}",
                    extra={"attempt": attempt, "error_kind": outcome.error.kind},
                )
            else:
                logger.warning(
                    f"Retryable status {outcome.status_code}, retrying in {wait_ms}ms",
                    extra={"attempt": attempt, "status_code": outcome.status_code},
                )
            attempt += 1
