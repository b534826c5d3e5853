"""
Shared fixtures for sitemap-builder tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest
import requests

from sitemap_builder import SitemapBuilder, SitemapConfig

BASE_URL = "https://example.com/"
GENERATED_AT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
STAMP = "2024-01-02T03:04:05+00:00"


@pytest.fixture
def builder(tmp_path) -> SitemapBuilder:
    return SitemapBuilder(BASE_URL, tmp_path)


@pytest.fixture
def make_builder(tmp_path):
    """Factory for builders writing under ``tmp_path`` with a custom config."""

    def _make(**config) -> SitemapBuilder:
        return SitemapBuilder(BASE_URL, tmp_path, SitemapConfig(**config))

    return _make


@dataclass
class FakeResponse:
    status_code: int
    text: str


@dataclass
class FakeSession:
    """Stands in for ``requests.Session``; fails for URLs containing any of ``failing``."""

    status_code: int = 200
    text: str = "<html><body><h1>Sitemap\nreceived</h1></body></html>"
    failing: tuple[str, ...] = ()
    calls: list[str] = field(default_factory=list)

    def get(self, url, headers=None, timeout=None):
        self.calls.append(url)
        if any(marker in url for marker in self.failing):
            raise requests.exceptions.ConnectionError(f"cannot reach {url}")
        return FakeResponse(self.status_code, self.text)


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()
