"""
Tagged values returned by handlers and by the chain.

A handler answers every message with one of ``Handled``, ``Forward`` or
``Fail``. The chain folds those into a ``DispatchResult``: ``Ok`` when a
handler consumed the message (or nobody did), or the condition itself
when a handler signalled one.

    >>> match chain.handle(message):
    ...     case Ok(handled_by):
    ...         ...
    ...     case FatalCondition(text) | UnknownMessage(text):
    ...         ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FatalCondition:
    text: str

    @property
    def description(self) -> str:
        return f"Fatal Error: {self.text}"


@dataclass(frozen=True)
class UnknownMessage:
    text: str

    @property
    def description(self) -> str:
        return f"Unknown message: {self.text}"


Condition = FatalCondition | UnknownMessage


@dataclass(frozen=True)
class Handled:
    handler: str


@dataclass(frozen=True)
class Forward:
    pass


@dataclass(frozen=True)
class Fail:
    condition: Condition


Outcome = Handled | Forward | Fail


@dataclass(frozen=True)
class Ok:
    """The message reached its handler. ``handled_by`` is None when it was dropped."""

    handled_by: Optional[str] = None

    @property
    def dropped(self) -> bool:
        return self.handled_by is None


DispatchResult = Ok | FatalCondition | UnknownMessage


class LogChainError(Exception):
    pass


class ConditionRaised(LogChainError):

    def __init__(self, condition: Condition):
        super().__init__(condition.description)
        self.condition = condition


def raise_for(result: DispatchResult) -> Ok:
    """Turn a condition back into an exception for callers that prefer try/except."""
    match result:
        case Ok():
            return result
        case FatalCondition() | UnknownMessage():
            raise ConditionRaised(result)
        case _:
            raise TypeError(f"Not a dispatch result: {result!r}")
