"""Sitemap file output.

Output layout for ``dest = public/sitemap.xml``:

    one document:
        public/sitemap.xml          # urlset

    several documents:
        public/sitemap-0.xml        # urlset
        public/sitemap-1.xml        # urlset
        public/sitemap.xml          # sitemapindex listing the files above
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from routesitemap.output.builder import build_sitemap, build_sitemap_index

logger = logging.getLogger(__name__)


class SitemapWriter:
    """Writes sitemap documents and, when needed, the sitemap index."""

    def __init__(self, dest: Path, public_path: str = "/") -> None:
        """Initialize writer.

        Args:
            dest: Sitemap file path; also the index path for several documents
            public_path: Public URL path of the sitemap directory, relative
                to the hostname
        """
        self._dest = dest
        self._public_path = public_path

    @property
    def dest(self) -> Path:
        """Destination of the sitemap or sitemap index."""
        return self._dest

    def shard_path(self, index: int) -> Path:
        """Get file path of the sitemap document at the given position."""
        return self._dest.with_name(f"{self._dest.stem}-{index}{self._dest.suffix}")

    def write(self, hostname: str, sitemaps: Sequence[str]) -> list[Path]:
        """Write serialized sitemap documents.

        Write errors are not handled: a failure aborts the remaining writes.

        Args:
            hostname: Site root used for the index entries
            sitemaps: Serialized sitemap documents, one per shard

        Returns:
            Written files, index last
        """
        self._dest.parent.mkdir(parents=True, exist_ok=True)

        # Index is not needed for a single sitemap
        if len(sitemaps) <= 1:
            content = sitemaps[0] if sitemaps else build_sitemap(hostname, [])
            self._dest.write_text(content, encoding="utf-8")
            logger.info(f"Wrote sitemap {self._dest}")
            return [self._dest]

        written: list[Path] = []
        urls: list[str] = []
        for index, sitemap in enumerate(sitemaps):
            save_path = self.shard_path(index)
            save_path.write_text(sitemap, encoding="utf-8")
            logger.debug(f"Wrote sitemap {save_path}")
            written.append(save_path)
            urls.append(f"{hostname}{self._public_path}{save_path.name}")

        self._dest.write_text(build_sitemap_index(urls), encoding="utf-8")
        written.append(self._dest)
        logger.info(f"Wrote {len(sitemaps)} sitemaps and index {self._dest}")
        return written
