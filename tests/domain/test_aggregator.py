"""Tests for RuleAggregator — ordering, aggregation, and fault propagation."""

from __future__ import annotations

import pytest

from rulecheck.domain.aggregator import RuleAggregator
from rulecheck.domain.outcome import Failure, Success


def _always(result: bool):
    return lambda _value: result


class TestEmptyAggregator:
    @pytest.mark.parametrize("value", ["", "anything", 0, None, [1, 2]])
    def test_no_rules_is_success(self, value: object) -> None:
        assert RuleAggregator().validate(value) == Success()

    def test_len_and_rules(self) -> None:
        agg = RuleAggregator[str]()
        assert len(agg) == 0
        assert agg.rules == ()


class TestAddRule:
    def test_returns_self_for_chaining(self) -> None:
        agg = RuleAggregator[str]()
        assert agg.add_rule(_always(True), "msg") is agg

    def test_appends_in_order(self) -> None:
        agg = RuleAggregator[str]().add_rule(_always(True), "first").add_rule(_always(True), "second")
        assert len(agg) == 2
        assert [r.message for r in agg.rules] == ["first", "second"]

    def test_name_defaults_to_predicate_name(self) -> None:
        def has_x(value: str) -> bool:
            return "x" in value

        agg = RuleAggregator[str]().add_rule(has_x, "needs x")
        assert agg.rules[0].name == "has_x"

    def test_explicit_name(self) -> None:
        agg = RuleAggregator[str]().add_rule(_always(True), "m", name="custom")
        assert agg.rules[0].name == "custom"

    def test_empty_message_accepted(self) -> None:
        agg = RuleAggregator[str]().add_rule(_always(False), "")
        assert agg.validate("x") == Failure(messages=("",))

    def test_rules_snapshot_is_detached(self) -> None:
        agg = RuleAggregator[str]().add_rule(_always(True), "a")
        snapshot = agg.rules
        agg.add_rule(_always(True), "b")
        assert len(snapshot) == 1
        assert len(agg.rules) == 2


class TestValidate:
    def test_all_pass(self) -> None:
        agg = RuleAggregator[str]().add_rule(_always(True), "a").add_rule(_always(True), "b")
        outcome = agg.validate("x")
        assert outcome.ok is True
        assert outcome.messages == ()

    def test_single_failure(self) -> None:
        agg = RuleAggregator[str]().add_rule(_always(True), "a").add_rule(_always(False), "b")
        assert agg.validate("x") == Failure(messages=("b",))

    def test_failures_keep_registration_order(self) -> None:
        agg = (
            RuleAggregator[int]()
            .add_rule(lambda n: n > 100, "too small")
            .add_rule(lambda n: n >= 0, "negative")
            .add_rule(lambda n: n % 2 == 0, "odd")
            .add_rule(lambda n: n != 7, "seven")
            .add_rule(lambda n: n % 5 == 0, "not a multiple of 5")
        )
        outcome = agg.validate(7)
        assert outcome.messages == ("too small", "odd", "seven", "not a multiple of 5")

    def test_every_rule_runs_after_a_failure(self) -> None:
        calls: list[str] = []

        def tracking(label: str, result: bool):
            def pred(_value: str) -> bool:
                calls.append(label)
                return result

            return pred

        agg = (
            RuleAggregator[str]()
            .add_rule(tracking("a", False), "a")
            .add_rule(tracking("b", True), "b")
            .add_rule(tracking("c", False), "c")
        )
        agg.validate("x")
        assert calls == ["a", "b", "c"]

    def test_reordering_changes_only_message_order(self) -> None:
        def short(s: str) -> bool:
            return len(s) > 3

        def upper(s: str) -> bool:
            return s.isupper()

        forward = RuleAggregator[str]().add_rule(short, "short").add_rule(upper, "upper")
        backward = RuleAggregator[str]().add_rule(upper, "upper").add_rule(short, "short")

        for value in ["ab", "ABCD", "abcd", "AB"]:
            assert forward.validate(value).ok == backward.validate(value).ok
        assert forward.validate("ab").messages == ("short", "upper")
        assert backward.validate("ab").messages == ("upper", "short")

    def test_idempotent(self, length_and_digit: RuleAggregator[str]) -> None:
        assert length_and_digit.validate("abc") == length_and_digit.validate("abc")
        assert length_and_digit.validate("abcdefgh1") == length_and_digit.validate("abcdefgh1")

    def test_duplicate_messages_reported_per_rule(self) -> None:
        agg = RuleAggregator[str]().add_rule(_always(False), "same").add_rule(_always(False), "same")
        assert agg.validate("x").messages == ("same", "same")

    def test_truthy_results_count_as_pass(self) -> None:
        import re

        agg = RuleAggregator[str]().add_rule(lambda s: re.match(r"\d+$", s), "digits only")
        assert agg.validate("123").ok is True
        assert agg.validate("12a").messages == ("digits only",)

    def test_validate_does_not_consume_rules(self, length_and_digit: RuleAggregator[str]) -> None:
        length_and_digit.validate("abc")
        assert len(length_and_digit) == 2


class TestPredicateFaults:
    def test_exception_propagates_unchanged(self) -> None:
        class Boom(Exception):
            pass

        def explode(_value: str) -> bool:
            raise Boom("rule bug")

        agg = RuleAggregator[str]().add_rule(_always(False), "first").add_rule(explode, "second")
        with pytest.raises(Boom, match="rule bug"):
            agg.validate("x")

    def test_index_error_from_rule_propagates(self) -> None:
        agg = RuleAggregator[str]().add_rule(lambda s: s[10] == "x", "tenth char")
        with pytest.raises(IndexError):
            agg.validate("short")


class TestScenarios:
    def test_scenario_a(self, length_and_digit: RuleAggregator[str]) -> None:
        outcome = length_and_digit.validate("abc")
        assert isinstance(outcome, Failure)
        assert outcome.messages == ("too short", "needs digit")

    def test_scenario_b(self, length_and_digit: RuleAggregator[str]) -> None:
        assert length_and_digit.validate("abcdefgh1") == Success()

    def test_scenario_c(self) -> None:
        agg = RuleAggregator[str]().add_rule(lambda s: len(s) > 8, "too short")
        assert agg.validate("123456789") == Success()

    def test_scenario_d_only_middle_fails(self) -> None:
        agg = (
            RuleAggregator[str]()
            .add_rule(_always(True), "first")
            .add_rule(_always(False), "middle")
            .add_rule(_always(True), "last")
        )
        assert agg.validate("x") == Failure(messages=("middle",))
