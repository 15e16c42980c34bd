"""rulecheck — ordered, short-circuit-free rule validation."""

from rulecheck.domain.aggregator import RuleAggregator
from rulecheck.domain.outcome import Failure, Success, ValidationOutcome
from rulecheck.domain.rules import Rule

__version__ = "0.1.0"

__all__ = [
    "Failure",
    "Rule",
    "RuleAggregator",
    "Success",
    "ValidationOutcome",
    "__version__",
]
