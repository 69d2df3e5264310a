"""Sitemap XML serialization and file output."""

from .builder import build_sitemap, build_sitemap_index
from .writer import SitemapWriter

__all__ = ['SitemapWriter', 'build_sitemap', 'build_sitemap_index']
