"""Sitemap generation from a route tree.

Chains the pipeline stages:

    Sitemap.from_route_configuration(routes)
        .filter_paths(["/auth"])
        .apply_params({"/child/:id": [{"id": ["1", "2"]}]})
        .build("https://example.com")
        .save(Path("public/sitemap.xml"))

Every step replaces the current path list with a new one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from routesitemap.core.filter import Rule, filter_paths
from routesitemap.core.params import apply_params
from routesitemap.core.routes import RouteNode, parse_routes
from routesitemap.core.splitter import DEFAULT_LIMIT_COUNT_PATHS, split_paths
from routesitemap.core.types import ParamsConfig, URLPath
from routesitemap.errors import InvalidInputError, RouteSitemapError
from routesitemap.output.builder import build_sitemap
from routesitemap.output.writer import SitemapWriter

logger = logging.getLogger(__name__)


class Sitemap:
    """Sitemap built from a route tree or a route configuration array."""

    def __init__(
        self,
        router: RouteNode | Mapping[str, object] | None = None,
        routes_configuration: Sequence[RouteNode | Mapping[str, object]] | None = None,
    ) -> None:
        """Flatten the routes into paths.

        Args:
            router: Route tree root
            routes_configuration: Route configuration array, used when
                router is not given

        Raises:
            InvalidInputError: If neither argument is given
        """
        if router is not None:
            self._paths = parse_routes(router)
        elif routes_configuration is not None:
            self._paths = parse_routes(routes_configuration)
        else:
            raise InvalidInputError("Need to pass a route tree or route configuration array")

        self._hostname: str | None = None
        self._shards: list[list[URLPath]] = []
        self._sitemaps: list[str] = []

    @classmethod
    def from_route_tree(cls, router: RouteNode | Mapping[str, object] | None) -> Sitemap:
        """Create a Sitemap from a route tree root."""
        if router is None:
            raise InvalidInputError("Need to pass a route tree")
        return cls(router)

    @classmethod
    def from_route_configuration(
        cls,
        routes_configuration: Sequence[RouteNode | Mapping[str, object]] | None,
    ) -> Sitemap:
        """Create a Sitemap from a route configuration array.

        Example:
            Sitemap.from_route_configuration([
                {
                    "routes": [
                        {"path": "/", "exact": True},
                        {
                            "path": "/child/:id",
                            "routes": [{"path": "/child/:id/grand-child"}],
                        },
                    ],
                },
            ])
        """
        if routes_configuration is None:
            raise InvalidInputError("Need to pass a route configuration array")
        return cls(routes_configuration=routes_configuration)

    @property
    def paths(self) -> tuple[URLPath, ...]:
        """Current path list."""
        return tuple(self._paths)

    @property
    def hostname(self) -> str | None:
        """Hostname given to build(), None before build."""
        return self._hostname

    @property
    def shards(self) -> list[list[URLPath]]:
        """Path shards, one per sitemap document."""
        return [list(shard) for shard in self._shards]

    @property
    def sitemaps(self) -> list[str]:
        """Serialized sitemap documents, one per shard."""
        return list(self._sitemaps)

    def filter_paths(self, rules: Rule | Iterable[Rule], is_valid: bool = False) -> Sitemap:
        """Filter paths using the given rules.

        Args:
            rules: Regular expressions matched anywhere in the path
            is_valid: If True, only matching paths are kept. If False,
                matching paths are dropped.

        Returns:
            Self for chaining
        """
        self._paths = filter_paths(self._paths, rules, is_valid)
        return self

    def apply_params(self, params: ParamsConfig, *, strict: bool = False) -> Sitemap:
        """Replace dynamic segments in paths using the given values.

        Args:
            params: Binding table, e.g.
                ``{"/path/:param/:sub": [{"param": "a", "sub": ["x", "y"]}]}``
            strict: Fail on paths with dynamic segments that have no binding

        Returns:
            Self for chaining
        """
        self._paths = apply_params(self._paths, params, strict=strict)
        return self

    def build(
        self,
        hostname: str,
        *,
        limit_count_paths: int = DEFAULT_LIMIT_COUNT_PATHS,
    ) -> Sitemap:
        """Split paths into shards and serialize one sitemap per shard.

        Args:
            hostname: Site root, e.g. "https://example.com"
            limit_count_paths: Maximum number of URLs per sitemap

        Returns:
            Self for chaining
        """
        if not hostname:
            raise InvalidInputError("Hostname is required to build a sitemap")

        shards = split_paths(self._paths, limit_count_paths)
        self._sitemaps = [build_sitemap(hostname, shard) for shard in shards]
        self._shards = shards
        self._hostname = hostname
        logger.info(f"Built {len(self._sitemaps)} sitemaps for {hostname}")
        return self

    def save(self, dest: Path | str, public_path: str = "/") -> list[Path]:
        """Save sitemaps and, for several of them, a sitemap index.

        Args:
            dest: Sitemap path; the index path when there are several sitemaps
            public_path: Public URL path of the sitemap files, default "/"

        Returns:
            Written files
        """
        if self._hostname is None:
            raise RouteSitemapError("build() must be called before save()")

        writer = SitemapWriter(Path(dest), public_path)
        return writer.write(self._hostname, self._sitemaps)
