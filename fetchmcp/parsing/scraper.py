"""Fetch a web page and convert it to Markdown.

Two strategies share one extraction routine. The primary strategy visits the
page with a :class:`~fetchmcp.parsing.collector.Collector` and extracts the
``<body>`` element. If that visit fails, or the body yields no Markdown, a
direct GET with a browser identity is issued and the whole static document is
extracted instead. Only a failure of that second request reaches the caller.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

import requests
from bs4.builder import ParserRejectedMarkup

from .collector import Collector, CollectorError, HTMLElement, parse_html
from .markdown import extract_markdown, format_markdown

logger = logging.getLogger(__name__)

FALLBACK_TIMEOUT = 10  # seconds
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/121.0.0.0 Safari/537.36"
)
BROWSER_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,"
    "image/avif,image/webp,*/*;q=0.8"
)
FALLBACK_ERROR_PREFIX = "http fallback failed"


class FetchError(Exception):
    """Raised when a page cannot be fetched by any strategy."""


@dataclass(slots=True)
class ScrapeResult:
    """Markdown rendition of a fetched page."""

    url: str
    title: str = ""
    markdown: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _fallback_error(stage: str, detail: object) -> FetchError:
    return FetchError(f"{FALLBACK_ERROR_PREFIX}: {stage}: {detail}")


def http_fallback_fetch(url: str, *, timeout: float = FALLBACK_TIMEOUT) -> ScrapeResult:
    """Fetch ``url`` with a plain GET and extract the static document.

    Raises:
        FetchError: On an invalid URL, network failure, non-2xx status,
            unreadable body or unparseable HTML.
    """
    headers = {"User-Agent": BROWSER_USER_AGENT, "Accept": BROWSER_ACCEPT}
    try:
        response = requests.get(url, headers=headers, timeout=timeout, stream=True)
    except (requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL) as exc:
        raise _fallback_error("build request failed", exc) from exc
    except requests.RequestException as exc:
        raise _fallback_error("http fetch failed", exc) from exc

    try:
        if not 200 <= response.status_code < 300:
            raise _fallback_error("unexpected status", response.status_code)
        try:
            # Streaming request: the body is read here, not in get().
            body = response.content
        except requests.RequestException as exc:
            raise _fallback_error("read body failed", exc) from exc
        content_type = response.headers.get("Content-Type")
    finally:
        response.close()

    try:
        soup = parse_html(body, content_type)
    except ParserRejectedMarkup as exc:
        raise _fallback_error("parse html failed", exc) from exc

    title_tag = soup.find("title")
    title = title_tag.get_text().strip() if title_tag is not None else ""
    content = extract_markdown(soup)
    return ScrapeResult(url=url, title=title, markdown=format_markdown(title, content))


class Scraper:
    """Two-strategy page to Markdown converter.

    Args:
        visit_timeout: Timeout for the primary visit in seconds. ``None``
            leaves the visit unbounded.
        fallback_timeout: Timeout for the fallback GET in seconds.
    """

    def __init__(
        self,
        *,
        visit_timeout: float | None = None,
        fallback_timeout: float = FALLBACK_TIMEOUT,
    ) -> None:
        self.visit_timeout = visit_timeout
        self.fallback_timeout = fallback_timeout

    def _new_collector(self) -> Collector:
        return Collector(timeout=self.visit_timeout, allow_url_revisit=True)

    def fetch_to_markdown(self, url: str) -> ScrapeResult:
        """Fetch ``url`` and return its Markdown rendition.

        Raises:
            FetchError: If the fallback strategy fails.
        """
        title: str | None = None
        body_parts: list[str] = []

        def on_title(element: HTMLElement) -> None:
            nonlocal title
            if title is None:
                title = element.text.strip()

        def on_body(element: HTMLElement) -> None:
            body_parts.append(extract_markdown(element.tag))

        collector = self._new_collector()
        collector.on_html("title", on_title)
        collector.on_html("body", on_body)

        try:
            collector.visit(url)
        except CollectorError as exc:
            logger.info("Primary fetch of %s failed (%s); using HTTP fallback", url, exc)
            return http_fallback_fetch(url, timeout=self.fallback_timeout)

        content = "".join(body_parts)
        if not content:
            logger.info("Primary fetch of %s produced no content; using HTTP fallback", url)
            return http_fallback_fetch(url, timeout=self.fallback_timeout)

        page_title = title or ""
        return ScrapeResult(url=url, title=page_title, markdown=format_markdown(page_title, content))


def quick_fetch(url: str, *, visit_timeout: float | None = None) -> ScrapeResult:
    """Fetch ``url`` with a fresh :class:`Scraper`."""
    return Scraper(visit_timeout=visit_timeout).fetch_to_markdown(url)


__all__ = [
    "BROWSER_ACCEPT",
    "BROWSER_USER_AGENT",
    "FALLBACK_TIMEOUT",
    "FetchError",
    "ScrapeResult",
    "Scraper",
    "http_fallback_fetch",
    "quick_fetch",
]
