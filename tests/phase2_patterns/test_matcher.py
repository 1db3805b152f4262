"""
Phase 2 Tests: Name Matchers

Covers compilation of each criterion kind, exact-match anchoring and blank
criterion handling.
"""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from memberfinder.patterns import (
    ALL,
    AllNamesMatcher,
    CallableNameMatcher,
    LiteralNameMatcher,
    RegexNameMatcher,
    compile_criteria,
    compile_criterion,
    is_blank,
    normalize_criteria,
)
from memberfinder.types import ValidationError

identifiers = st.from_regex(r"[a-z_][a-z0-9_]{0,12}", fullmatch=True)


class TestCompileCriterion:
    """Tests for compile_criterion."""

    def test_literal_is_exact(self):
        """A literal matches only the full name."""
        matcher = compile_criterion("run")
        assert isinstance(matcher, LiteralNameMatcher)
        assert matcher("run")
        assert not matcher("run_fast")
        assert not matcher("prerun")

    def test_literal_escapes_metacharacters(self):
        """Regex metacharacters in a literal are taken literally."""
        matcher = compile_criterion("a.b")
        assert matcher("a.b")
        assert not matcher("a_b")

    def test_regex_used_as_is(self):
        """Compiled regexes keep search semantics."""
        matcher = compile_criterion(re.compile(r"_action$"))
        assert isinstance(matcher, RegexNameMatcher)
        assert matcher("save_action")
        assert not matcher("action_save")

    def test_callable_predicate(self):
        """Callables are used as predicates."""
        matcher = compile_criterion(lambda name: name.isupper())
        assert isinstance(matcher, CallableNameMatcher)
        assert matcher("RUN")
        assert not matcher("run")

    def test_all_matches_any_non_empty_name(self):
        """ALL matches every non-empty name."""
        matcher = compile_criterion(ALL)
        assert isinstance(matcher, AllNamesMatcher)
        assert matcher("anything")
        assert not matcher("")

    def test_blank_rejected(self):
        """Blank literals cannot be compiled."""
        with pytest.raises(ValidationError):
            compile_criterion("  ")

    def test_scalar_matches_its_string_form(self):
        """Non-string scalars compile to a literal of their string form."""
        matcher = compile_criterion(42)
        assert isinstance(matcher, LiteralNameMatcher)
        assert matcher("42")
        assert not matcher("420")

    def test_blank_string_form_rejected(self):
        """A value whose string form is blank cannot be compiled."""

        class Nameless:
            def __str__(self):
                return " "

        with pytest.raises(ValidationError, match="Blank member name criterion"):
            compile_criterion(Nameless())

    def test_filter_preserves_order(self):
        """filter yields matching names in input order."""
        matcher = compile_criterion(re.compile(r"^re"))
        assert list(matcher.filter(["resize", "save", "render"])) == ["resize", "render"]


class TestNormalizeCriteria:
    """Tests for blank handling and flattening."""

    def test_blank_detection(self):
        assert is_blank(None)
        assert is_blank("")
        assert is_blank("   ")
        assert not is_blank("x")
        assert not is_blank(ALL)

    def test_drops_blanks_and_flattens(self):
        """Blank criteria disappear and nested lists are flattened."""
        pattern = re.compile("x")
        assert normalize_criteria(["", "run", None, ["  ", pattern]], "stop") == ["run", pattern, "stop"]

    def test_all_collapses_compiled_list(self):
        """ALL anywhere in the criteria makes the others irrelevant."""
        matchers = compile_criteria(["run", ALL, re.compile("x")])
        assert len(matchers) == 1
        assert isinstance(matchers[0], AllNamesMatcher)


class TestAnchoringProperties:
    """Property tests for literal matching."""

    @given(name=identifiers, suffix=identifiers)
    def test_literal_never_matches_extensions(self, name, suffix):
        """A literal never matches a name with extra leading or trailing text."""
        matcher = compile_criterion(name)
        assert matcher(name)
        assert not matcher(name + suffix)
        assert not matcher(suffix + name)

    @given(name=st.text(min_size=1).filter(lambda s: s.strip()))
    def test_literal_matches_itself(self, name):
        """Any non-blank literal, metacharacters included, matches itself."""
        assert compile_criterion(name)(name)
