"""Sitemap XML documents.

Builds documents following the sitemaps.org protocol:

    <urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
      <url><loc>https://example.com/about</loc></url>
    </urlset>

and the index document that lists several sitemaps when the paths do
not fit into one.
"""

from collections.abc import Iterable
from xml.etree import ElementTree as ET

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def build_sitemap(hostname: str, paths: Iterable[str]) -> str:
    """Build a sitemap document listing every path under hostname.

    Args:
        hostname: Site root, e.g. "https://example.com"
        paths: Host-relative paths starting with "/"

    Returns:
        Serialized XML document
    """
    base = hostname.rstrip("/")
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
    for path in paths:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = f"{base}{path}"
    return _serialize(urlset)


def build_sitemap_index(urls: Iterable[str]) -> str:
    """Build a sitemap index document.

    Args:
        urls: Absolute URLs of the sitemap files, in order

    Returns:
        Serialized XML document
    """
    index = ET.Element("sitemapindex", xmlns=SITEMAP_NS)
    for url in urls:
        sitemap = ET.SubElement(index, "sitemap")
        ET.SubElement(sitemap, "loc").text = url
    return _serialize(index)


def _serialize(root: ET.Element) -> str:
    ET.indent(root, space="  ")
    return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"
