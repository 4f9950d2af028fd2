"""Unit tests for composite exclusion rules."""

import pytest

from fstoolbox.exclusion_rules.base_rules import BaseExclusionRules
from fstoolbox.exclusion_rules.composite_rules import CompositeExclusionRules
from fstoolbox.exclusion_rules.git_rules import GitIgnoreExclusionRules
from fstoolbox.exclusion_rules.name_rules import NameExclusionRules


class RecordingExclusionRules(BaseExclusionRules):
    """Exclusion rules recording every path they are asked about."""

    def __init__(self, excluded=()):
        self.excluded = set(excluded)
        self.calls = []

    def exclude(self, path: str) -> bool:
        self.calls.append(path)
        return path in self.excluded


def test_init_with_empty_rules():
    with pytest.raises(ValueError, match="At least one exclusion rule must be provided"):
        CompositeExclusionRules([])


def test_init_with_invalid_rule_type():
    with pytest.raises(TypeError, match="Rule at index 1 must implement BaseExclusionRules"):
        CompositeExclusionRules([NameExclusionRules(), "invalid"])


def test_exclude_if_any_rule_matches():
    patterns = GitIgnoreExclusionRules()
    patterns.add_rule("*.tmp")
    composite = CompositeExclusionRules([NameExclusionRules(["cache"]), patterns])

    assert composite.exclude("cache/")
    assert composite.exclude("dir/file.tmp")
    assert not composite.exclude("dir/file.txt")


def test_exclude_short_circuits():
    first = RecordingExclusionRules(["match"])
    second = RecordingExclusionRules()
    composite = CompositeExclusionRules([first, second])

    assert composite.exclude("match")
    assert second.calls == []

    assert not composite.exclude("other")
    assert second.calls == ["other"]


def test_has_rules():
    assert not CompositeExclusionRules([NameExclusionRules(), GitIgnoreExclusionRules()]).has_rules()
    assert CompositeExclusionRules([NameExclusionRules(), NameExclusionRules(["x"])]).has_rules()
    # Rules that don't report otherwise count as configured
    assert CompositeExclusionRules([RecordingExclusionRules()]).has_rules()


def test_add_rule_object():
    composite = CompositeExclusionRules([NameExclusionRules(["a"])])
    composite.add_rule_object(NameExclusionRules(["b"]))

    assert len(composite.get_rules()) == 2
    assert composite.exclude("b")

    with pytest.raises(TypeError, match="Rule must implement BaseExclusionRules"):
        composite.add_rule_object("not a rule")


def test_get_rules_returns_a_copy():
    composite = CompositeExclusionRules([NameExclusionRules(["a"])])
    composite.get_rules().clear()
    assert len(composite.rules) == 1
