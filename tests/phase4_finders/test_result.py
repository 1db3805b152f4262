"""
Phase 4 Tests: FinderResult

Immutable per-target outcomes and their set algebra.
"""

import re

import pytest

from memberfinder import FinderResult, MatchEntry
from memberfinder.finders import TargetMap


class A:
    pass


class B:
    pass


class C:
    pass


def result(matched=None, not_matched=None) -> FinderResult:
    return FinderResult.from_mappings(matched=matched, not_matched=not_matched)


class TestAccessors:
    def test_matched_names_sorted_and_deduplicated(self):
        r = result(matched={A: ["b", "a", "b"]})
        assert r.matched[A] == ("a", "b")
        assert r.get(A) == MatchEntry(target=A, names=("a", "b"))

    def test_keys_and_entries(self):
        r = result(matched={A: ["x"]}, not_matched={B: ["y"]})
        assert r.matched_keys() == [A]
        assert r.not_matched_keys() == [B]
        assert [e.target for e in r.entries()] == [A, B]
        assert len(r) == 2
        assert r.get(C) is None

    def test_is_empty(self):
        assert FinderResult().is_empty()
        assert result(not_matched={A: ["x"]}).is_empty()
        assert not result(matched={A: ["x"]}).is_empty()

    def test_truthiness_follows_matches(self):
        assert not FinderResult()
        assert not result(not_matched={A: ["x"]})
        assert result(matched={A: ["x"]})
        assert result(matched={A: ["x"]}, not_matched={B: ["y"]})

    def test_target_map_is_read_only(self):
        r = result(matched={A: ["x"]})
        assert isinstance(r.matched, TargetMap)
        with pytest.raises(TypeError):
            r.matched[B] = ("y",)

    def test_match_beats_no_match_for_same_target(self):
        r = FinderResult([MatchEntry.not_found(A, ["x"]), MatchEntry.found(A, ["y"])])
        assert r.matched == {A: ("y",)}
        assert r.not_matched == {}

    def test_to_dict(self):
        pattern = re.compile("^z")
        data = result(matched={A: ["x"]}, not_matched={B: [pattern]}).to_dict()
        assert data["matched"][0]["names"] == ["x"]
        assert data["matched"][0]["target"].endswith(".A")
        assert data["not_matched"][0]["criteria"] == [repr(pattern)]


class TestAlgebra:
    def test_union(self):
        left = result(matched={A: ["a"]}, not_matched={B: ["p"], C: ["q"]})
        right = result(matched={A: ["b"], B: ["c"]}, not_matched={C: ["r"]})
        union = left | right
        assert union.matched == {A: ("a", "b"), B: ("c",)}
        assert union.not_matched == {C: ["q", "r"]}

    def test_intersection(self):
        left = result(matched={A: ["a", "b"], B: ["c"]}, not_matched={C: ["q"]})
        right = result(matched={A: ["b", "z"], B: ["d"]}, not_matched={C: ["q"]})
        both = left & right
        assert both.matched == {A: ("b",)}
        assert both.not_matched == {C: ["q"]}

    def test_difference(self):
        left = result(matched={A: ["a", "b"], B: ["c"]}, not_matched={C: ["q"]})
        right = result(matched={A: ["b"], B: ["c"]}, not_matched={C: ["q"]})
        diff = left - right
        assert diff.matched == {A: ("a",)}
        assert diff.not_matched == {}

    def test_operators_return_new_results(self):
        left = result(matched={A: ["a"]})
        right = result(matched={A: ["b"]})
        _ = left | right
        assert left.matched == {A: ("a",)}

    def test_equality(self):
        assert result(matched={A: ["a"]}) == result(matched={A: ["a"]})
        assert result(matched={A: ["a"]}) != result(not_matched={A: ["a"]})
