"""
Resolve the one sitemap URL advertised in robots.txt and pinged to search engines.
"""

from __future__ import annotations


def resolve_publication_target(
    base_url: str,
    has_index: bool,
    creates_gzip: bool,
    index_file_name: str,
    sitemap_file_name: str,
) -> str:
    if has_index:
        return base_url + index_file_name
    if creates_gzip:
        return base_url + sitemap_file_name + ".gz"
    return base_url + sitemap_file_name
