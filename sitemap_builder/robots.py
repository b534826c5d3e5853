"""
Rewrite the ``Sitemap:`` lines of a robots.txt file.

Only lines starting with ``Sitemap:`` are touched; everything else is kept as is.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

SITEMAP_DIRECTIVE = "Sitemap:"
DEFAULT_ROBOTS = "User-agent: *\nAllow: /"


def robots_sitemap_targets(
    publication_target: str,
    base_url: str,
    sitemap_file_name: str,
    has_index: bool,
    create_gzip_file: bool,
) -> list[str]:
    """
    URLs to advertise in robots.txt.

    A lone sitemap written both plain and compressed is listed twice, plain first.
    Otherwise only the publication target is listed.
    """
    if create_gzip_file and not has_index:
        plain = base_url + sitemap_file_name
        return [plain, plain + ".gz"]
    return [publication_target]


def render_robots(existing: str | None, targets: Sequence[str]) -> str:
    directives = "\n".join(f"{SITEMAP_DIRECTIVE} {target}" for target in targets)
    if existing is None:
        return f"{DEFAULT_ROBOTS}\n\n{directives}"
    kept = [line for line in existing.split("\n") if not line.startswith(SITEMAP_DIRECTIVE)]
    return "".join(f"{line}\n" for line in kept) + directives


def update_robots_file(path: Path, targets: Sequence[str]) -> Path:
    existing = path.read_text(encoding="utf-8") if path.exists() else None
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_robots(existing, targets), encoding="utf-8")
    logger.info("%s %s with %d sitemap reference(s)", "Updated" if existing is not None else "Created", path, len(targets))
    return path
