"""Rule-based path filtering."""

import logging
import re
from collections.abc import Iterable, Sequence

from routesitemap.core.types import URLPath

logger = logging.getLogger(__name__)

Rule = str | re.Pattern[str]


def compile_rules(rules: Rule | Iterable[Rule]) -> list[re.Pattern[str]]:
    """Compile string rules into regular expressions.

    Already compiled patterns are kept as is. A single rule may be passed
    instead of a list.
    """
    if isinstance(rules, (str, re.Pattern)):
        rules = [rules]
    return [rule if isinstance(rule, re.Pattern) else re.compile(rule) for rule in rules]


def filter_paths(
    paths: Sequence[URLPath],
    rules: Rule | Iterable[Rule],
    is_valid: bool = False,
) -> list[URLPath]:
    """Filter paths with a list of pattern rules.

    A path matches when any rule is found anywhere in it. In include mode
    (``is_valid=True``) only matching paths are kept, so an empty rule set
    keeps nothing. In exclude mode (the default) matching paths are
    dropped, so an empty rule set keeps everything.

    Args:
        paths: Paths to filter
        rules: Regular expressions (strings or compiled patterns)
        is_valid: Keep matching paths instead of dropping them

    Returns:
        Filtered paths in their original order
    """
    patterns = compile_rules(rules)
    keep_matching = bool(is_valid)
    result = [
        path
        for path in paths
        if any(pattern.search(path) for pattern in patterns) == keep_matching
    ]
    mode = "include" if keep_matching else "exclude"
    logger.info(
        f"Filtered paths ({mode}, {len(patterns)} rules): {len(paths)} -> {len(result)}"
    )
    return result
