"""
Split collected URL records into protocol-sized batches.
"""

from __future__ import annotations

from collections.abc import Sequence

from .config import MAX_SITEMAPS_PER_INDEX, MAX_URLS_PER_SITEMAP
from .errors import CapacityError, ConfigurationError, StateError
from .models import UrlRecord


def partition(collection: Sequence[UrlRecord], max_per_batch: int) -> list[list[UrlRecord]]:
    """
    Split ``collection`` into consecutive batches of at most ``max_per_batch`` records.

    Global order is preserved and only the last batch may be shorter.

    Raises:
        ConfigurationError: ``max_per_batch`` is above the 50,000 protocol ceiling or below 1.
        StateError: the collection is empty.
    """
    if max_per_batch > MAX_URLS_PER_SITEMAP:
        raise ConfigurationError(f"More than {MAX_URLS_PER_SITEMAP:,} URLs per single sitemap is not allowed.")
    if max_per_batch < 1:
        raise ConfigurationError("max_urls_per_sitemap must be at least 1.")
    if not collection:
        raise StateError("To create a sitemap, call add_url or add_urls first.")
    return [list(collection[i : i + max_per_batch]) for i in range(0, len(collection), max_per_batch)]


def check_capacity(count: int) -> None:
    if count > MAX_SITEMAPS_PER_INDEX:
        raise CapacityError(count, MAX_SITEMAPS_PER_INDEX)
