"""Route tree normalization and flattening.

Converts a declarative route tree into canonical URL paths. Two input
shapes are supported and collapsed into one representation before
flattening starts:

- ``RouteNode`` trees built in Python
- route configuration data (dicts with ``path`` and ``routes``,
  ``children`` or ``childRoutes``), e.g. loaded from JSON or TOML
"""

from __future__ import annotations

import json
import logging
import re
import tomllib
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from routesitemap.core.types import URLPath
from routesitemap.errors import InvalidInputError, MalformedRouteError

logger = logging.getLogger(__name__)

CHILD_KEYS = ("routes", "children", "childRoutes")

_SLASHES_RE = re.compile(r"/{2,}")


@dataclass(frozen=True)
class RouteNode:
    """Route tree node.

    A node without ``path`` is a layout or index route: it contributes no
    segment of its own but its children are still visited.
    """

    path: str | None = None
    children: tuple[RouteNode, ...] = field(default_factory=tuple)
    exact: bool = False

    def __post_init__(self) -> None:
        if self.path is not None and not isinstance(self.path, str):
            raise MalformedRouteError(
                f"Route path must be a string, got {type(self.path).__name__}"
            )


RouteSource = RouteNode | Mapping[str, object] | Sequence[RouteNode | Mapping[str, object]]


def normalize_routes(source: RouteSource) -> tuple[RouteNode, ...]:
    """Convert any supported route input into a tuple of RouteNode.

    Args:
        source: A RouteNode, a route mapping, or a sequence of either

    Returns:
        Top-level route nodes in declaration order

    Raises:
        MalformedRouteError: If a node or its fields have the wrong shape
    """
    if isinstance(source, (RouteNode, Mapping)):
        return (_normalize_node(source),)
    if isinstance(source, (str, bytes)) or not isinstance(source, Sequence):
        raise MalformedRouteError(
            f"Routes must be a route node or a sequence of nodes, got {type(source).__name__}"
        )
    return tuple(_normalize_node(item) for item in source)


def _normalize_node(item: object) -> RouteNode:
    """Normalize a single route node recursively."""
    if isinstance(item, RouteNode):
        if isinstance(item.children, (str, bytes, Mapping)) or not isinstance(
            item.children, Sequence
        ):
            raise MalformedRouteError(f"Route children must be a sequence in route '{item.path}'")
        return RouteNode(
            path=item.path,
            children=tuple(_normalize_node(child) for child in item.children),
            exact=item.exact,
        )
    if not isinstance(item, Mapping):
        raise MalformedRouteError(f"Route must be a mapping, got {type(item).__name__}")

    path = item.get("path")
    if path is not None and not isinstance(path, str):
        raise MalformedRouteError(f"Route path must be a string, got {type(path).__name__}")

    exact = item.get("exact", False)
    if not isinstance(exact, bool):
        raise MalformedRouteError(f"Route 'exact' must be a boolean in route '{path}'")

    children: list[RouteNode] = []
    for key in CHILD_KEYS:
        raw = item.get(key)
        if raw is None:
            continue
        if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Sequence):
            raise MalformedRouteError(f"Route '{key}' must be a list in route '{path}'")
        children.extend(_normalize_node(child) for child in raw)

    return RouteNode(path=path, children=tuple(children), exact=exact)


def join_path(base: str, segment: str) -> URLPath:
    """Compose a route segment with its inherited base path.

    Absolute segments replace the base. Relative segments are joined with
    a single slash. The result never ends with a slash unless it is the
    root path.

    Args:
        base: Canonical path inherited from the parent ("" at top level)
        segment: Route's own path

    Returns:
        Canonical absolute path
    """
    joined = segment if segment.startswith("/") else f"{base}/{segment}"
    joined = _SLASHES_RE.sub("/", f"/{joined}")
    if len(joined) > 1:
        joined = joined.rstrip("/")
    return URLPath(joined)


def parse_routes(source: RouteSource) -> list[URLPath]:
    """Flatten a route tree into canonical paths.

    Traversal is depth-first pre-order: parents come before children and
    siblings keep declaration order. Identical paths declared at different
    positions are all emitted.

    Args:
        source: Route tree or route configuration

    Returns:
        List of canonical paths
    """
    nodes = normalize_routes(source)
    paths = [path for node in nodes for path in _walk(node, "")]
    logger.info(f"Parsed {len(paths)} paths from {len(nodes)} top-level routes")
    return paths


def _walk(node: RouteNode, base: str) -> Iterator[URLPath]:
    """Yield the node's path, then its descendants' paths."""
    if node.path:
        base = join_path(base, node.path)
        logger.debug(f"Route path: {base}")
        yield base
    for child in node.children:
        yield from _walk(child, base)


def load_route_configuration(path: Path) -> list[dict[str, object]]:
    """Load route configuration data from a JSON or TOML file.

    JSON files hold a list of route objects or a single route object.
    TOML files hold a top-level ``routes`` array of tables.

    Args:
        path: Path to the route file

    Returns:
        List of route mappings, ready for ``normalize_routes``

    Raises:
        FileNotFoundError: If the file doesn't exist
        InvalidInputError: If the file format or content is not supported
    """
    if not path.exists():
        raise FileNotFoundError(f"Routes file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, dict):
            data = [data]
    elif suffix == ".toml":
        with path.open("rb") as f:
            data = tomllib.load(f).get("routes")
    else:
        raise InvalidInputError(f"Unsupported routes file format: {path.suffix}")

    if not isinstance(data, list):
        raise InvalidInputError(f"Routes file must contain a list of routes: {path}")

    logger.info(f"Loaded {len(data)} top-level routes from {path}")
    return data
