"""Built-in password rule set.

Three rules, registered in this order:
- length strictly greater than ``min_length``
- at least one ASCII digit
- at least one lowercase and one uppercase letter
"""

from __future__ import annotations

from rulecheck.domain.aggregator import RuleAggregator

DEFAULT_MIN_LENGTH = 8

DIGITS = frozenset("0123456789")

DIGIT_MESSAGE = "password must contain a digit."
MIXED_CASE_MESSAGE = "password must contain both of lower and upper case."


def length_message(min_length: int) -> str:
    return f"password length must be greater than {min_length} chars."


def has_digit(password: str) -> bool:
    """True if *password* contains an ASCII digit."""
    return any(ch in DIGITS for ch in password)


def has_mixed_case(password: str) -> bool:
    """True if *password* contains both a lowercase and an uppercase letter."""
    has_lower = any(ch.islower() for ch in password)
    has_upper = any(ch.isupper() for ch in password)
    return has_lower and has_upper


def password_validator(
    min_length: int = DEFAULT_MIN_LENGTH,
    *,
    require_digit: bool = True,
    require_mixed_case: bool = True,
) -> RuleAggregator[str]:
    """Build an aggregator holding the password rules for the given policy."""
    validator = RuleAggregator[str]().add_rule(
        lambda password: len(password) > min_length,
        length_message(min_length),
        name="min_length",
    )
    if require_digit:
        validator.add_rule(has_digit, DIGIT_MESSAGE)
    if require_mixed_case:
        validator.add_rule(has_mixed_case, MIXED_CASE_MESSAGE)
    return validator
