from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Generic, Optional, Sequence, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    RETRYABLE = "retryable"
    FATAL = "fatal"


@dataclass(frozen=True)
class StrategyOutcome(Generic[T]):
    kind: OutcomeKind
    value: Optional[T] = None
    reason: str = ""

    @classmethod
    def success(cls, value: T) -> "StrategyOutcome[T]":
        return cls(OutcomeKind.SUCCESS, value)

    @classmethod
    def retryable(cls, value: T, reason: str) -> "StrategyOutcome[T]":
        # Carries what the caller should see now, e.g. a "try again shortly" notice.
        return cls(OutcomeKind.RETRYABLE, value, reason)

    @classmethod
    def fatal(cls, reason: str) -> "StrategyOutcome[T]":
        return cls(OutcomeKind.FATAL, None, reason)


Strategy = Callable[..., Awaitable[StrategyOutcome[T]]]


class FallbackExhaustedError(RuntimeError):
    pass


async def run_chain(operation: str, strategies: Sequence[Strategy], *args: Any) -> T:
    """
    Await each strategy in order with the same arguments.

    SUCCESS and RETRYABLE outcomes end the chain with their value; FATAL
    outcomes are logged and the next strategy is tried.
    """
    for strategy in strategies:
        name = getattr(strategy, "__name__", repr(strategy))
        outcome = await strategy(*args)
        if outcome.kind is OutcomeKind.SUCCESS:
            logger.debug("%s: strategy %s succeeded", operation, name)
            return outcome.value  # type: ignore[return-value]
        if outcome.kind is OutcomeKind.RETRYABLE:
            logger.warning("%s: strategy %s asked for a retry (%s)", operation, name, outcome.reason)
            return outcome.value  # type: ignore[return-value]
        logger.warning("%s: strategy %s failed (%s), falling back", operation, name, outcome.reason)
    raise FallbackExhaustedError(f"No strategy produced a result for {operation}")
