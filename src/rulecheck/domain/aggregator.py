"""RuleAggregator — run every registered rule and collect all failures.

Rules are evaluated in registration order with no short-circuiting, so a
single ``validate`` call surfaces every problem with the input at once.

Usage::

    validator = (
        RuleAggregator[str]()
        .add_rule(lambda s: len(s) > 8, "too short")
        .add_rule(lambda s: any(c.isdigit() for c in s), "needs digit")
    )
    validator.validate("abc")  # Failure(messages=("too short", "needs digit"))
"""

from __future__ import annotations

import logging
from typing import Generic, Self, TypeVar

from rulecheck.domain.outcome import Failure, Success, ValidationOutcome
from rulecheck.domain.rules import Predicate, Rule, predicate_name

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RuleAggregator(Generic[T]):
    """Ordered, append-only collection of rules over inputs of type ``T``.

    Not safe for concurrent mutation; share across threads only with
    external locking.
    """

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rules={len(self._rules)})"

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Snapshot of the registered rules in registration order."""
        return tuple(self._rules)

    def add_rule(
        self,
        predicate: Predicate,
        message: str,
        *,
        name: str | None = None,
    ) -> Self:
        """Register a rule and return ``self`` for chaining.

        Args:
            predicate: Called with the input; truthy means the rule passes.
            message: Reported when the predicate is falsy.
            name: Label for log output. Defaults to the predicate's name.
        """
        rule = Rule(
            predicate=predicate,
            message=message,
            name=name or predicate_name(predicate),
        )
        self._rules.append(rule)
        logger.debug("Registered rule %s (%d total)", rule.name, len(self._rules))
        return self

    def validate(self, value: T) -> ValidationOutcome:
        """Evaluate every rule against *value*.

        Returns :class:`Success` when all rules pass, otherwise a
        :class:`Failure` listing the messages of the failed rules in
        registration order. Exceptions raised by a predicate propagate
        unchanged and abort the call.
        """
        failed = [rule for rule in self._rules if not rule.check(value)]
        if not failed:
            logger.debug("All %d rules passed", len(self._rules))
            return Success()

        logger.debug(
            "%d of %d rules failed: %s",
            len(failed),
            len(self._rules),
            ", ".join(rule.name for rule in failed),
        )
        return Failure(messages=tuple(rule.message for rule in failed))
