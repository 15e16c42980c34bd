"""Shared pytest fixtures for rulecheck tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from rulecheck.domain.aggregator import RuleAggregator


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config overrides in the environment.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RULECHECK_CONFIG", raising=False)
    monkeypatch.delenv("RULECHECK_PASSWORD__MIN_LENGTH", raising=False)


@pytest.fixture
def length_and_digit() -> RuleAggregator[str]:
    """The two-rule aggregator used by the length/digit scenarios."""
    return (
        RuleAggregator[str]()
        .add_rule(lambda s: len(s) > 8, "too short")
        .add_rule(lambda s: any(c.isdigit() for c in s), "needs digit")
    )
