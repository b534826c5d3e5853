"""
Render URL batches and the sitemap index as sitemaps.org 0.9 XML.

Documents are assembled as text so the declaration, the generator comments and
the ``xsi:schemaLocation`` attribute come out exactly as written here.
"""

from __future__ import annotations

import html
from collections.abc import Sequence
from xml.sax.saxutils import escape

from ._version import __version__
from .config import (
    GENERATOR_NAME,
    GENERATOR_URL,
    MAX_SITEMAP_BYTES,
    SITEINDEX_XSD,
    SITEMAP_NS,
    SITEMAP_XSD,
    XSI_NS,
)
from .errors import SizeLimitError
from .models import SitemapDocument, SitemapIndexDocument, UrlRecord

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def escape_location(value: str) -> str:
    """Escape ``& < > " '`` so a URL is safe in both text and attribute positions."""
    return html.escape(value, quote=True)


def batch_file_name(sitemap_file_name: str, index: int, total: int) -> str:
    """
    Name of batch ``index`` (0-based) out of ``total``.

    A lone batch keeps the configured name. Once there are several, every
    ``.xml`` is replaced by ``{index + 1}.xml.gz`` since index members are
    always written compressed.
    """
    if total == 1:
        return sitemap_file_name
    return sitemap_file_name.replace(".xml", f"{index + 1}.xml.gz")


def generator_comment(generated_at: str, version: str = __version__) -> str:
    return (
        f'<!-- generator="{GENERATOR_NAME}/{version}" -->\n'
        f'<!-- sitemap-generator-url="{GENERATOR_URL}" sitemap-generator-version="{version}" -->\n'
        f'<!-- generated-on="{generated_at}" -->'
    )


def _root_open(tag: str, schema: str) -> str:
    return (
        f'<{tag} xmlns:xsi="{XSI_NS}" '
        f'xsi:schemaLocation="{SITEMAP_NS} {schema}" '
        f'xmlns="{SITEMAP_NS}">'
    )


def _document(tag: str, schema: str, body: str, generated_at: str, version: str) -> str:
    return "\n".join(
        [
            XML_DECLARATION,
            generator_comment(generated_at, version),
            f"{_root_open(tag, schema)}{body}</{tag}>",
        ]
    ) + "\n"


def render_url(record: UrlRecord) -> str:
    parts = ["<url>", f"<loc>{escape_location(record.location)}</loc>"]
    for tag, value in record.optional_fields():
        parts.append(f"<{tag}>{escape(value)}</{tag}>")
    parts.append("</url>")
    return "".join(parts)


def serialize_batch(
    batch: Sequence[UrlRecord],
    file_name: str,
    generated_at: str,
    version: str = __version__,
) -> SitemapDocument:
    """
    Render one batch as a ``<urlset>`` document.

    Raises:
        SizeLimitError: the UTF-8 encoded document is larger than 10,485,760 bytes.
    """
    body = "".join(render_url(record) for record in batch)
    content = _document("urlset", SITEMAP_XSD, body, generated_at, version)
    size = len(content.encode("utf-8"))
    if size > MAX_SITEMAP_BYTES:
        raise SizeLimitError(size, MAX_SITEMAP_BYTES)
    return SitemapDocument(file_name=file_name, content=content)


def serialize_index(
    documents: Sequence[SitemapDocument],
    base_url: str,
    file_name: str,
    generated_at: str,
    version: str = __version__,
) -> SitemapIndexDocument:
    """Render a ``<sitemapindex>`` listing every document, all stamped with ``generated_at``."""
    lastmod = escape(generated_at)
    body = "".join(
        f"<sitemap><loc>{escape_location(base_url + document.file_name)}</loc><lastmod>{lastmod}</lastmod></sitemap>"
        for document in documents
    )
    content = _document("sitemapindex", SITEINDEX_XSD, body, generated_at, version)
    return SitemapIndexDocument(
        file_name=file_name,
        content=content,
        sitemap_urls=tuple(base_url + document.file_name for document in documents),
    )
