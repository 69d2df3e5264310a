"""Tests for path filtering."""

import re

from routesitemap.core.filter import compile_rules, filter_paths
from routesitemap.core.types import URLPath

PATHS = [URLPath(p) for p in ["/", "/about", "/auth", "/auth/login", "/thanks"]]


class TestFilterPaths:
    """Tests for filter_paths()."""

    def test__exclude_mode__drops_matching(self) -> None:
        """Drop paths matching a rule in default mode."""
        result = filter_paths([URLPath("/"), URLPath("/about"), URLPath("/auth")], [r"/auth"])

        assert result == ["/", "/about"]

    def test__include_mode__keeps_matching(self) -> None:
        """Keep only matching paths when is_valid is set."""
        result = filter_paths(PATHS, [r"/auth", r"/thanks"], is_valid=True)

        assert result == ["/auth", "/auth/login", "/thanks"]

    def test__any_rule_matches(self) -> None:
        """A path is matched by any one of several rules."""
        result = filter_paths(PATHS, [r"/auth", r"/thanks"])

        assert result == ["/", "/about"]

    def test__compiled_patterns__accepted(self) -> None:
        """Accept precompiled regular expressions."""
        result = filter_paths(PATHS, [re.compile(r"^/auth$")])

        assert result == ["/", "/about", "/auth/login", "/thanks"]

    def test__empty_rules_exclude_mode__keeps_all(self) -> None:
        """No rules in exclude mode is identity."""
        assert filter_paths(PATHS, []) == PATHS

    def test__empty_rules_include_mode__keeps_none(self) -> None:
        """No rules in include mode keeps nothing, unlike exclude mode."""
        assert filter_paths(PATHS, [], is_valid=True) == []

    def test__modes__partition_paths(self) -> None:
        """Include and exclude results cover all paths without overlap."""
        rules = [r"/a"]

        excluded = filter_paths(PATHS, rules, is_valid=False)
        included = filter_paths(PATHS, rules, is_valid=True)

        assert set(excluded) | set(included) == set(PATHS)
        assert set(excluded) & set(included) == set()

    def test__single_string_rule__treated_as_one_rule(self) -> None:
        """A bare string rule is not split into characters."""
        result = filter_paths([URLPath("/"), URLPath("/about"), URLPath("/auth")], r"/auth")

        assert result == ["/", "/about"]

    def test__single_compiled_rule__accepted(self) -> None:
        """A bare compiled pattern works as a one-rule list."""
        result = filter_paths(PATHS, re.compile(r"^/about$"), is_valid=True)

        assert result == ["/about"]

    def test__input_not_modified(self) -> None:
        """Return a new list and leave the input alone."""
        paths = list(PATHS)

        filter_paths(paths, [r"/auth"])

        assert paths == PATHS


class TestCompileRules:
    """Tests for compile_rules()."""

    def test__strings_compiled(self) -> None:
        """Compile string rules and keep compiled ones."""
        compiled = re.compile("x")

        patterns = compile_rules(["a", compiled])

        assert patterns[0].pattern == "a"
        assert patterns[1] is compiled
