"""
Protocol limits and the immutable builder configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
SITEMAP_XSD = "http://www.sitemaps.org/schemas/sitemap/0.9/sitemap.xsd"
SITEINDEX_XSD = "http://www.sitemaps.org/schemas/sitemap/0.9/siteindex.xsd"

MAX_URL_LENGTH = 2048
MAX_URLS_PER_SITEMAP = 50000
MAX_SITEMAP_BYTES = 10485760
MAX_SITEMAPS_PER_INDEX = 1000

GENERATOR_NAME = "sitemap-builder"
GENERATOR_URL = "https://pypi.org/project/sitemap-builder/"


@dataclass(frozen=True)
class SitemapConfig:
    sitemap_file_name: str = "sitemap.xml"
    sitemap_index_file_name: str = "sitemap-index.xml"
    robots_file_name: str = "robots.txt"
    # Sitemaps with very long URLs can pass 10MB before 50,000 entries;
    # lower this when that happens.
    max_urls_per_sitemap: int = MAX_URLS_PER_SITEMAP
    # Ignored for the batches once an index is produced: those are always compressed.
    create_gzip_file: bool = False
