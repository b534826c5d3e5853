"""
Build sitemaps.org XML sitemaps and sitemap indexes from a list of URLs.
"""

from __future__ import annotations

from ._version import __version__
from .builder import BuildState, SitemapBuilder
from .config import SitemapConfig
from .errors import (
    CapacityError,
    ConfigurationError,
    SitemapError,
    SizeLimitError,
    StateError,
    ValidationError,
)
from .models import SitemapDocument, SitemapIndexDocument, UrlRecord
from .submit import SubmissionResult

__all__ = [
    "BuildState",
    "CapacityError",
    "ConfigurationError",
    "SitemapBuilder",
    "SitemapConfig",
    "SitemapDocument",
    "SitemapError",
    "SitemapIndexDocument",
    "SizeLimitError",
    "StateError",
    "SubmissionResult",
    "UrlRecord",
    "ValidationError",
    "__version__",
]
