"""
SitemapBuilder: collect URLs, build sitemaps in memory, then publish them.

Typical use::

    builder = SitemapBuilder("https://example.com/", "public")
    builder.add_url("https://example.com/", "2024-01-01", "daily", "0.8")
    builder.create_sitemap()
    builder.write_sitemap()
    builder.update_robots()
    builder.submit_sitemap()

A builder is meant for a single owner; share it across threads only behind a lock.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path

import requests

from .config import MAX_URL_LENGTH, SitemapConfig
from .errors import ConfigurationError, StateError, ValidationError
from .models import SitemapDocument, SitemapIndexDocument, UrlRecord
from .partition import check_capacity, partition
from .publication import resolve_publication_target
from .robots import robots_sitemap_targets, update_robots_file
from .serializer import batch_file_name, serialize_batch, serialize_index
from .submit import DEFAULT_TIMEOUT, SubmissionResult, submit_sitemap
from .writer import write_documents

logger = logging.getLogger(__name__)


class BuildState(str, Enum):
    EMPTY = "empty"
    COLLECTING = "collecting"
    BUILT = "built"
    WRITTEN = "written"
    SUBMITTED = "submitted"


PUBLISHABLE_STATES = (BuildState.BUILT, BuildState.WRITTEN, BuildState.SUBMITTED)


class SitemapBuilder:
    def __init__(self, base_url: str, base_path: str | Path | None = None, config: SitemapConfig | None = None):
        """
        Args:
            base_url: Site URL sitemap locations are built from, ending with ``/``.
            base_path: Directory the sitemap and robots files are written to.
                Defaults to the current working directory.
            config: File names, batch size and compression settings.
        """
        if not base_url or not base_url.endswith("/"):
            raise ConfigurationError(f"base_url must end with '/': {base_url!r}")
        self.base_url = base_url
        self.base_path = Path(base_path) if base_path is not None else Path(".")
        self.config = config or SitemapConfig()
        self._state = BuildState.EMPTY
        self._urls: list[UrlRecord] = []
        self._sitemaps: list[SitemapDocument] = []
        self._index: SitemapIndexDocument | None = None
        self._publication_target = ""

    @property
    def state(self) -> BuildState:
        return self._state

    @property
    def urls(self) -> tuple[UrlRecord, ...]:
        return tuple(self._urls)

    @property
    def sitemaps(self) -> list[SitemapDocument]:
        self._require_built("read sitemaps")
        return list(self._sitemaps)

    @property
    def sitemap_index(self) -> SitemapIndexDocument | None:
        self._require_built("read the sitemap index")
        return self._index

    @property
    def publication_target(self) -> str:
        self._require_built("resolve the sitemap URL")
        return self._publication_target

    def _require_built(self, action: str) -> None:
        if self._state not in PUBLISHABLE_STATES:
            raise StateError(f"To {action}, call create_sitemap first.")

    def add_url(
        self,
        location: str,
        last_modified: str | None = None,
        change_frequency: str | None = None,
        priority: str | None = None,
    ) -> UrlRecord:
        """
        Queue one URL for the next build.

        ``last_modified`` should be ISO 8601. Optional fields left as ``None``
        are omitted from the XML rather than written as empty elements.

        Raises:
            StateError: the sitemap was already built.
            ValidationError: ``location`` is empty or longer than 2048 characters.
        """
        if self._state in PUBLISHABLE_STATES:
            raise StateError("URLs can't be added after create_sitemap has been called.")
        if not location:
            raise ValidationError("URL is mandatory.")
        if len(location) > MAX_URL_LENGTH:
            raise ValidationError(f"URL length can't be bigger than {MAX_URL_LENGTH} characters.")
        record = UrlRecord(location, last_modified, change_frequency, priority)
        self._urls.append(record)
        self._state = BuildState.COLLECTING
        return record

    def add_urls(self, records: Iterable[UrlRecord | Sequence[str | None]]) -> None:
        """
        Queue many URLs at once.

        Each item is a ``UrlRecord`` or a sequence of one to four fields in
        ``add_url`` argument order.
        """
        for record in records:
            if isinstance(record, UrlRecord):
                self.add_url(record.location, record.last_modified, record.change_frequency, record.priority)
                continue
            if isinstance(record, str):
                raise ValidationError("Each record must be a sequence of fields, not a bare string.")
            fields = list(record)
            if not 1 <= len(fields) <= 4:
                raise ValidationError(f"A URL record takes 1 to 4 fields, got {len(fields)}.")
            fields += [None] * (4 - len(fields))
            self.add_url(*fields)

    def create_sitemap(self, generated_at: datetime | None = None) -> None:
        """
        Build the sitemaps, and the index when there is more than one, in memory.

        Calling it again rebuilds and replaces the previous artifacts. Nothing
        is replaced if the build fails.

        Raises:
            ConfigurationError: ``max_urls_per_sitemap`` is outside 1..50,000.
            StateError: no URL was added.
            SizeLimitError: one sitemap serializes to more than 10MB.
            CapacityError: more than 1,000 sitemaps would be needed.
        """
        config = self.config
        batches = partition(self._urls, config.max_urls_per_sitemap)
        stamp = (generated_at or datetime.now(UTC)).isoformat(timespec="seconds")
        total = len(batches)
        sitemaps = [
            serialize_batch(batch, batch_file_name(config.sitemap_file_name, i, total), stamp)
            for i, batch in enumerate(batches)
        ]
        check_capacity(len(sitemaps))

        index = None
        if total > 1:
            index = serialize_index(sitemaps, self.base_url, config.sitemap_index_file_name, stamp)
        target = resolve_publication_target(
            self.base_url,
            index is not None,
            config.create_gzip_file,
            config.sitemap_index_file_name,
            config.sitemap_file_name,
        )

        self._sitemaps = sitemaps
        self._index = index
        self._publication_target = target
        self._state = BuildState.BUILT
        logger.info("Built %d sitemap(s) for %d URL(s), publishing %s", total, len(self._urls), target)

    def to_array(self) -> list[SitemapDocument]:
        """Return the index (if any) followed by every sitemap, for callers that skip the file writer."""
        self._require_built("export sitemaps")
        if self._index is not None:
            return [self._index, *self._sitemaps]
        return list(self._sitemaps)

    def write_sitemap(self) -> list[Path]:
        self._require_built("write sitemap")
        written = write_documents(self.base_path, self._sitemaps, self._index, self.config.create_gzip_file)
        self._state = BuildState.WRITTEN
        return written

    def robots_targets(self) -> list[str]:
        return robots_sitemap_targets(
            self.publication_target,
            self.base_url,
            self.config.sitemap_file_name,
            self._index is not None,
            self.config.create_gzip_file,
        )

    def update_robots(self) -> Path:
        """Point robots.txt under ``base_path`` at the new sitemap, creating the file if needed."""
        self._require_built("update robots.txt")
        return update_robots_file(self.base_path / self.config.robots_file_name, self.robots_targets())

    def submit_sitemap(
        self,
        yahoo_app_id: str | None = None,
        timeout: int = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> list[SubmissionResult]:
        """
        Ping Yahoo, Google, Ask and Bing with the publication target.

        Without ``yahoo_app_id`` Yahoo is still pinged anonymously, which it
        rate-limits to about once per day.
        """
        self._require_built("submit sitemap")
        results = submit_sitemap(self.publication_target, yahoo_app_id, timeout=timeout, session=session)
        self._state = BuildState.SUBMITTED
        return results
