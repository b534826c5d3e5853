"""
Error kinds raised while collecting, partitioning and serializing sitemaps.
"""

from __future__ import annotations


class SitemapError(Exception):
    """Base exception for sitemap building errors."""

    pass


class ValidationError(SitemapError, ValueError):
    """Raised when a URL record is missing its location or the location is too long."""

    pass


class ConfigurationError(SitemapError, ValueError):
    """Raised when the builder is configured outside protocol limits."""

    pass


class StateError(SitemapError, RuntimeError):
    """Raised when an operation is called before the builder is ready for it."""

    pass


class SizeLimitError(SitemapError):
    """Raised when one serialized sitemap is larger than the protocol allows."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"Sitemap size is {size:,} bytes, more than {limit:,}. "
            "Decrease max_urls_per_sitemap."
        )


class CapacityError(SitemapError):
    """Raised when more sitemaps are produced than one index may reference."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Sitemap index would reference {count:,} sitemaps (max {limit:,}). "
            "Too many URLs were submitted."
        )
