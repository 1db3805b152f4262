"""Method finder.

Resolves which members of a set of types and objects match a set of name
criteria. Method names, not bound method objects, are always returned,
because instance methods can only be bound once an instance exists.

Usage:
    finder = MethodFinder()

    # Keyword specification
    result = finder.find(
        types=[Widget, "Gadget"],
        methods=[re.compile(r"_action$"), "save"],
        options=["public", "instance", "suppress_ancestor_methods"],
    )

    # Positional convention, matching every name by default
    result = finder.find_all_by(Widget, ALL, "class")

Recognized find() keys:
    types / type        One or more types or registered type names.
    objects / object    One or more live objects. Strings given here are
                        treated as type names.
    methods / method    One or more names, compiled regexes, predicates or ALL.
                        Other values are matched by their string form.
    options             Any of public, protected, private, instance, class,
                        singleton, suppress_ancestor_methods. public and
                        instance are assumed when no visibility or scope is
                        given. singleton cannot be combined with class or a
                        visibility flag.
"""

from __future__ import annotations

from typing import Any, Sequence

from memberfinder.config import FinderConfig
from memberfinder.finders.ancestors import list_members_safely, suppress_inherited
from memberfinder.finders.result import FinderResult, MatchEntry
from memberfinder.finders.scope import (
    ScopeResolver,
    is_recognized_option,
    validate_flags,
    validate_specification,
)
from memberfinder.patterns import ALL, NameMatcher, compile_criteria, normalize_criteria
from memberfinder.reflection import PythonReflectionAdapter, ReflectionAdapter
from memberfinder.types import Flag, ProbeId
from memberfinder.utils.helpers import describe_target, make_list
from memberfinder.utils.logger import logger


class MethodFinder:
    """Member resolution engine.

    A finder holds only its reflection adapter and configuration, so one
    instance can serve concurrent callers. Nothing is cached between calls.
    """

    is_recognized_option = staticmethod(is_recognized_option)

    def __init__(
        self,
        adapter: ReflectionAdapter | None = None,
        config: FinderConfig | None = None,
    ) -> None:
        self.config = config or FinderConfig()
        self.adapter = adapter or PythonReflectionAdapter(
            registry=self.config.registry,
            include_dunder=self.config.include_dunder,
            include_properties=self.config.include_properties,
        )

    def find(self, **spec: Any) -> FinderResult:
        """Find members matching a keyword specification.

        Returns an empty result when no targets are given, and maps every
        target to not-matched with ``[]`` when no criteria are given.

        Raises:
            InvalidOptionsError: For unknown keys or options, or options
                that conflict with singleton.
        """
        flags = validate_specification(spec)
        targets = make_list(spec.get("types"), spec.get("type"), spec.get("objects"), spec.get("object"))
        if not targets:
            return FinderResult()
        criteria = normalize_criteria(spec.get("methods"), spec.get("method"))
        if not criteria:
            return FinderResult(MatchEntry.not_found(t, []) for t in targets)
        return self._find(targets, criteria, flags, original=criteria)

    def find_all_by(self, targets: Any, patterns: Any = ALL, *scope_options: Any) -> FinderResult:
        """Find members using a positional specification.

        Args:
            targets: One target or a sequence of targets.
            patterns: One criterion or a sequence; every name by default.
            *scope_options: Option flags, as in find().

        Raises:
            InvalidOptionsError: For unknown or conflicting options.
        """
        if targets is None:
            return FinderResult()
        flags = validate_flags(*scope_options)
        return self._find(make_list(targets), normalize_criteria(patterns), flags, original=patterns)

    # ------------------------------------------------------------------

    def _find(
        self,
        targets: Sequence[Any],
        criteria: Sequence[Any],
        flags: frozenset[Flag],
        original: Any,
    ) -> FinderResult:
        matchers = compile_criteria(criteria)
        resolver = ScopeResolver(flags)
        entries = []
        for target in targets:
            names = self._match_target(target, matchers, resolver)
            if names:
                entries.append(MatchEntry.found(target, names))
            else:
                entries.append(MatchEntry.not_found(target, original))
            logger.debug("{} -> {}", describe_target(target), sorted(names) or "not matched")
        return FinderResult(entries)

    def _match_target(
        self,
        target: Any,
        matchers: Sequence[NameMatcher],
        resolver: ScopeResolver,
    ) -> set[str]:
        probes = resolver.probes_for(self.adapter.is_type(target))
        found: set[str] = set()
        for probe in probes:
            candidates = self._candidates(target, probe)
            for matcher in matchers:
                found.update(matcher.filter(candidates))
        if found and resolver.suppress_ancestors:
            found = suppress_inherited(self.adapter, target, resolver, found)
        return found

    def _candidates(self, target: Any, probe: ProbeId) -> list[str]:
        return list_members_safely(self.adapter, target, probe)


_default_finder: MethodFinder | None = None


def _finder() -> MethodFinder:
    global _default_finder
    if _default_finder is None:
        _default_finder = MethodFinder()
    return _default_finder


def find(**spec: Any) -> FinderResult:
    """Run MethodFinder.find() on a finder using the default configuration."""
    return _finder().find(**spec)


def find_all_by(targets: Any, patterns: Any = ALL, *scope_options: Any) -> FinderResult:
    """Run MethodFinder.find_all_by() on a finder using the default configuration."""
    return _finder().find_all_by(targets, patterns, *scope_options)
