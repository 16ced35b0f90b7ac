"""Tests for SelectionService."""

from __future__ import annotations

from compselect.domain.selection import ComponentSelection
from compselect.rules.registry import ComponentSelectionRules
from compselect.services.selection import SelectionService


def _reject_snapshots(selection: ComponentSelection) -> None:
    if selection.candidate.version.endswith("-SNAPSHOT"):
        selection.reject("snapshot")


def _registry() -> ComponentSelectionRules:
    rules = ComponentSelectionRules()
    rules.all(lambda cs: None)
    rules.module("org.gradle:api", _reject_snapshots)
    return rules


class TestListRules:
    def test_describes_rules(self) -> None:
        result = SelectionService(_registry()).list_rules()
        assert result.ok
        assert result.op == "rules"
        assert result.data["count"] == 2
        assert [r["target"] for r in result.data["rules"]] == ["all", "org.gradle:api"]
        assert [r["index"] for r in result.data["rules"]] == [0, 1]

    def test_empty_registry(self) -> None:
        result = SelectionService(ComponentSelectionRules()).list_rules()
        assert result.ok
        assert result.data == {"count": 0, "rules": []}


class TestEvaluate:
    def test_accepts_and_rejects(self) -> None:
        result = SelectionService(_registry()).evaluate(
            ["org.gradle:api:1.0-SNAPSHOT", "org.gradle:api:1.0", "org.gradle:lib:1.0-SNAPSHOT"]
        )
        assert result.ok
        candidates = result.data["candidates"]
        assert [c["rejected"] for c in candidates] == [True, False, False]
        assert candidates[0]["reason"] == "snapshot"
        assert [c["matching_rules"] for c in candidates] == [2, 2, 1]
        assert result.data["accepted"] == 2
        assert result.data["rejected"] == 1

    def test_matching_rules_counts_rules_skipped_after_rejection(self) -> None:
        seen: list[ComponentSelection] = []
        rules = ComponentSelectionRules()
        rules.all(lambda cs: cs.reject("first"))
        rules.module("org.gradle:api", seen.append)

        result = SelectionService(rules).evaluate(["org.gradle:api:1.0"])

        candidate = result.data["candidates"][0]
        assert candidate["matching_rules"] == 2
        assert candidate["reason"] == "first"
        assert seen == []

    def test_invalid_candidate(self) -> None:
        result = SelectionService(_registry()).evaluate(["org.gradle:api"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_CANDIDATE"
        assert result.error.detail["candidate"] == "org.gradle:api"

    def test_failing_rule(self) -> None:
        def fail(selection: ComponentSelection) -> None:
            raise RuntimeError("boom")

        rules = ComponentSelectionRules().all(fail)
        result = SelectionService(rules).evaluate(["g:m:1.0"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "RULE_FAILED"
        assert result.error.detail["cause"] == "boom"
        assert "g:m:1.0" in result.error.message
