"""
Notify search engines that a new sitemap has been published.

Each endpoint gets exactly one GET request. A failing endpoint is reported in
its own result and never stops the remaining ones from being tried.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; SitemapBuilder/1.0; +https://pypi.org/project/sitemap-builder/)",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}
DEFAULT_TIMEOUT = 20

YAHOO_APP_ID_PLACEHOLDER = "USERID"
YAHOO_APP_ENDPOINT = (
    "http://search.yahooapis.com/SiteExplorerService/V1/updateNotification?appid=USERID&url="
)
YAHOO_PING_ENDPOINT = "http://search.yahooapis.com/SiteExplorerService/V1/ping?sitemap="
SEARCH_ENGINE_ENDPOINTS = [
    "https://www.google.com/webmasters/tools/ping?sitemap=",
    "http://submissions.ask.com/ping?sitemap=",
    "https://www.bing.com/webmaster/ping.aspx?siteMap=",
]


@dataclass
class SubmissionResult:
    site: str
    url: str
    status_code: int | None
    message: str

    @property
    def ok(self) -> bool:
        return self.status_code is not None and self.status_code < 400


def ping_endpoints(yahoo_app_id: str | None = None) -> list[str]:
    """Endpoint templates to append the escaped sitemap URL to, Yahoo first."""
    if yahoo_app_id is not None:
        yahoo = YAHOO_APP_ENDPOINT.replace(YAHOO_APP_ID_PLACEHOLDER, yahoo_app_id)
    else:
        yahoo = YAHOO_PING_ENDPOINT
    return [yahoo, *SEARCH_ENGINE_ENDPOINTS]


def short_site(endpoint: str) -> str:
    host = urlparse(endpoint).hostname or ""
    labels = host.split(".")
    return ".".join(labels[-2:])


def soup_of(markup: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(markup, "lxml")
    except Exception:
        return BeautifulSoup(markup, "html.parser")


def response_message(body: str) -> str:
    """Strip markup from a ping response and fold it onto one line."""
    if not body:
        return ""
    return soup_of(body).get_text().replace("\n", " ")


def submit_sitemap(
    sitemap_url: str,
    yahoo_app_id: str | None = None,
    timeout: int = DEFAULT_TIMEOUT,
    session: requests.Session | None = None,
) -> list[SubmissionResult]:
    http = session if session is not None else requests
    escaped = html.escape(sitemap_url, quote=True)
    results: list[SubmissionResult] = []
    for endpoint in ping_endpoints(yahoo_app_id):
        full_url = endpoint + escaped
        site = short_site(endpoint)
        try:
            response = http.get(full_url, headers=HEADERS, timeout=timeout)
        except requests.exceptions.RequestException as exc:
            logger.warning("Ping to %s failed: %s", site, exc)
            results.append(SubmissionResult(site=site, url=full_url, status_code=None, message=str(exc)))
            continue
        logger.info("Pinged %s: HTTP %s", site, response.status_code)
        results.append(
            SubmissionResult(
                site=site,
                url=full_url,
                status_code=response.status_code,
                message=response_message(response.text),
            )
        )
    return results
