"""routesitemap - Sitemaps from route trees.

Flattens a route tree into canonical paths, filters them, expands
dynamic segments and writes one or more sitemap files.
"""

from .core.filter import filter_paths
from .core.params import apply_params
from .core.routes import RouteNode, parse_routes
from .core.splitter import split_paths
from .errors import (
    InvalidInputError,
    MalformedRouteError,
    RouteSitemapError,
    UnresolvedParameterError,
)
from .sitemap import Sitemap

__all__ = [
    'InvalidInputError',
    'MalformedRouteError',
    'RouteNode',
    'RouteSitemapError',
    'Sitemap',
    'UnresolvedParameterError',
    'apply_params',
    'filter_paths',
    'parse_routes',
    'split_paths',
]
