"""
Persist built sitemaps to disk, plain or gzip-compressed.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import Sequence
from pathlib import Path

from .models import SitemapDocument, SitemapIndexDocument

logger = logging.getLogger(__name__)


def write_file(content: str, path: Path) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def write_gzip_file(content: str, path: Path) -> Path:
    with gzip.open(path, "wb") as handle:
        handle.write(content.encode("utf-8"))
    return path


def write_documents(
    base_path: Path,
    sitemaps: Sequence[SitemapDocument],
    index: SitemapIndexDocument | None,
    create_gzip_file: bool,
) -> list[Path]:
    """
    Write the build artifacts under ``base_path`` and return the written paths.

    With an index the index itself is written plain and every member sitemap is
    compressed under its ``.xml.gz`` name. A lone sitemap is written plain, plus a
    compressed ``<name>.gz`` copy when ``create_gzip_file`` is set.
    """
    base_path.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    if index is not None:
        written.append(write_file(index.content, base_path / index.file_name))
        for sitemap in sitemaps:
            written.append(write_gzip_file(sitemap.content, base_path / sitemap.file_name))
    else:
        sitemap = sitemaps[0]
        written.append(write_file(sitemap.content, base_path / sitemap.file_name))
        if create_gzip_file:
            written.append(write_gzip_file(sitemap.content, base_path / f"{sitemap.file_name}.gz"))
    for path in written:
        logger.info("Wrote %s", path)
    return written
