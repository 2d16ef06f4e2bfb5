"""Sequential fallback over an ordered list of candidates.

Tries each candidate in turn and stops at the first success.  There is no
delay, jitter or retry of a single candidate: the list length is the only
bound on attempts.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import FallbackExhausted

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FallbackOutcome(Generic[T]):
    """The candidate that succeeded and what it returned."""

    candidate: str
    value: T
    attempts: int


async def try_in_order(
    candidates: Iterable[str],
    attempt: Callable[[str], Awaitable[T]],
) -> FallbackOutcome[T]:
    """Await ``attempt(candidate)`` for each candidate until one succeeds.

    Raises:
        FallbackExhausted: every candidate raised (or there were none).
    """
    errors: list[tuple[str, BaseException]] = []
    for candidate in candidates:
        logger.debug("Trying candidate %s", candidate)
        try:
            value = await attempt(candidate)
        except Exception as e:
            logger.warning("Candidate %s failed: %s", candidate, e)
            errors.append((candidate, e))
            continue
        return FallbackOutcome(candidate=candidate, value=value, attempts=len(errors) + 1)

    raise FallbackExhausted(errors)
