"""Dynamic segment substitution.

Paths may contain dynamic segments such as ``:id``. A binding table maps
such a path to a list of records; every record produces one concrete
path per combination of its values:

    {"/path/:param/:sub": [{"param": "a", "sub": ["x", "y"]}]}
    -> ["/path/a/x", "/path/a/y"]

Combinations are enumerated with the leftmost parameter varying slowest.
The number of generated paths is the product of the value counts, so
tables with many multi-valued parameters grow quickly.
"""

import itertools
import logging
import re
from collections.abc import Mapping, Sequence

from routesitemap.core.types import ParamRecord, ParamsConfig, URLPath
from routesitemap.errors import InvalidInputError, UnresolvedParameterError

logger = logging.getLogger(__name__)

PARAM_RE = re.compile(r":([A-Za-z_$][\w$]*)")


def get_param_names(path: str) -> list[str]:
    """Return the distinct parameter names of a path in order of appearance."""
    return list(dict.fromkeys(PARAM_RE.findall(path)))


def apply_params(
    paths: Sequence[URLPath],
    params: ParamsConfig,
    *,
    strict: bool = False,
) -> list[URLPath]:
    """Replace dynamic segments with bound values.

    Paths without an entry in ``params`` are passed through unchanged.
    Expanded paths take the position of the path they were built from.

    Args:
        paths: Paths to expand
        params: Binding table keyed by the exact path string
        strict: Raise for paths left with dynamic segments instead of
            passing them through

    Returns:
        Expanded paths

    Raises:
        UnresolvedParameterError: If a record lacks a value for one of the
            path's parameters, or in strict mode for any path still holding
            a dynamic segment
        InvalidInputError: If a binding value is not a string or list of strings
    """
    result: list[URLPath] = []
    for path in paths:
        records = params.get(path)
        if records is None:
            if strict:
                names = get_param_names(path)
                if names:
                    raise UnresolvedParameterError(path, names[0])
            result.append(path)
            continue

        if isinstance(records, (str, bytes)) or not isinstance(records, Sequence):
            raise InvalidInputError(f"Params for '{path}' must be a list of records")

        expanded = [
            expanded_path
            for record in records
            for expanded_path in expand_path(path, record)
        ]
        if strict:
            for expanded_path in expanded:
                names = get_param_names(expanded_path)
                if names:
                    raise UnresolvedParameterError(expanded_path, names[0])
        logger.debug(f"Expanded {path} into {len(expanded)} paths")
        result.extend(expanded)

    logger.info(f"Applied params: {len(paths)} -> {len(result)} paths")
    return result


def expand_path(path: str, record: ParamRecord) -> list[URLPath]:
    """Build every concrete path for a single binding record.

    Args:
        path: Path with dynamic segments
        record: Parameter name to a value or a list of values

    Returns:
        Concrete paths, leftmost parameter varying slowest
    """
    if not isinstance(record, Mapping):
        raise InvalidInputError(f"Binding record for '{path}' must be a mapping")

    names = get_param_names(path)
    choices = [_value_choices(path, record, name) for name in names]

    expanded: list[URLPath] = []
    for combination in itertools.product(*choices):
        values = dict(zip(names, combination, strict=True))
        expanded.append(URLPath(PARAM_RE.sub(lambda m: values[m.group(1)], path)))
    return expanded


def _value_choices(path: str, record: ParamRecord, name: str) -> list[str]:
    """Get the ordered values bound to a parameter."""
    if name not in record:
        raise UnresolvedParameterError(path, name)

    value = record[name]
    if isinstance(value, (list, tuple)):
        return [_to_str(path, name, item) for item in value]
    return [_to_str(path, name, value)]


def _to_str(path: str, name: str, value: object) -> str:
    """Convert a single bound value to its path form."""
    if isinstance(value, str):
        return value
    # bool is an int subclass
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise InvalidInputError(
        f"Value of ':{name}' for '{path}' must be a string or list of strings, "
        f"got {type(value).__name__}"
    )
