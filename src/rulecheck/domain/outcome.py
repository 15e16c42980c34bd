"""ValidationOutcome — the two-case result of running an aggregator.

INVARIANT: an outcome is a Failure iff at least one rule failed, and a
Failure carries exactly one message per failed rule, in registration order.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class Success(BaseModel):
    """Every rule passed. Carries no payload."""

    model_config = {"frozen": True}

    ok: Literal[True] = True

    @computed_field  # type: ignore[prop-decorator]
    @property
    def messages(self) -> tuple[str, ...]:
        return ()


class Failure(BaseModel):
    """At least one rule failed.

    Attributes:
        messages: Failure messages of the failed rules, in the order the
            rules were registered. Never empty.
    """

    model_config = {"frozen": True}

    ok: Literal[False] = False
    messages: tuple[str, ...] = Field(min_length=1)


ValidationOutcome = Success | Failure
