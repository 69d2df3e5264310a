"""Exception hierarchy for routesitemap.

Every pipeline stage raises one of these instead of returning partial
output, so callers can catch ``RouteSitemapError`` at a single place.
"""


class RouteSitemapError(Exception):
    """Base for all routesitemap errors."""


class InvalidInputError(RouteSitemapError, ValueError):
    """Raised when the pipeline is given missing or unusable input.

    Examples: neither a route tree nor a route configuration was passed,
    an empty hostname, or a non-positive shard limit.
    """


class MalformedRouteError(RouteSitemapError, ValueError):
    """Raised when a route node fails structural validation."""


class UnresolvedParameterError(RouteSitemapError):
    """Raised when a dynamic segment has no value to substitute."""

    def __init__(self, path: str, param: str) -> None:
        self.path = path
        self.param = param
        super().__init__(f"No value for parameter ':{param}' in path '{path}'")
