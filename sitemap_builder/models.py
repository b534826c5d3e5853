"""
Records passed between the collect, partition, serialize and publish stages.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UrlRecord:
    location: str
    last_modified: str | None = None  # ISO 8601, not checked
    change_frequency: str | None = None  # always, hourly, daily, weekly, monthly, yearly, never
    priority: str | None = None  # 0.0 - 1.0

    def optional_fields(self) -> list[tuple[str, str]]:
        """Return ``(tag, value)`` pairs for the optional fields that were supplied, in schema order."""
        fields = [
            ("lastmod", self.last_modified),
            ("changefreq", self.change_frequency),
            ("priority", self.priority),
        ]
        return [(tag, value) for tag, value in fields if value is not None]


@dataclass(frozen=True)
class SitemapDocument:
    file_name: str
    content: str

    @property
    def size(self) -> int:
        return len(self.content.encode("utf-8"))


@dataclass(frozen=True)
class SitemapIndexDocument(SitemapDocument):
    # Absolute <loc> values, one per batch, in batch order.
    sitemap_urls: tuple[str, ...]
