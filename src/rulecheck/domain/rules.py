"""Rule — a predicate paired with the message reported when it fails."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

Predicate = Callable[[Any], Any]


def predicate_name(predicate: Predicate) -> str:
    """Best-effort display name for a predicate (function, lambda, or callable object)."""
    name = getattr(predicate, "__name__", None)
    if name is None:
        name = type(predicate).__name__
    return str(name)


class Rule(BaseModel):
    """A single validation rule.

    Attributes:
        predicate: Returns truthy when the input satisfies the rule.
            Must be pure; it receives the input as-is and must not mutate it.
        message: Reported when the predicate is falsy. Opaque to the
            aggregator; an empty string is accepted.
        name: Label used in log output only.
    """

    model_config = {"frozen": True}

    predicate: Predicate
    message: str
    name: str = ""

    def check(self, value: Any) -> bool:
        """Evaluate the predicate against *value*.

        Exceptions raised by the predicate are not caught.
        """
        return bool(self.predicate(value))
