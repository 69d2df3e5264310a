"""Partitioning of the final path list into sitemap-sized shards."""

import logging
from collections.abc import Sequence

from routesitemap.core.types import URLPath
from routesitemap.errors import InvalidInputError

logger = logging.getLogger(__name__)

# A sitemap document may list at most 50,000 URLs
DEFAULT_LIMIT_COUNT_PATHS = 49999


def split_paths(
    paths: Sequence[URLPath],
    limit: int = DEFAULT_LIMIT_COUNT_PATHS,
) -> list[list[URLPath]]:
    """Split paths into contiguous shards of at most ``limit`` items.

    Concatenating the shards gives back the input. Only the last shard may
    be shorter than ``limit``. An empty input produces no shards.

    Args:
        paths: Paths to split
        limit: Maximum number of paths per shard

    Returns:
        List of shards in order

    Raises:
        InvalidInputError: If limit is not a positive integer
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidInputError(f"Path limit must be a positive integer, got {limit!r}")

    shards = [list(paths[i : i + limit]) for i in range(0, len(paths), limit)]
    logger.info(f"Split {len(paths)} paths into {len(shards)} shards (limit {limit})")
    return shards
