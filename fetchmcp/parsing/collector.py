"""Single-hop page collector with tag-triggered callbacks.

A :class:`Collector` fetches one page, parses it and fires every callback
registered with :meth:`Collector.on_html` for each element matching the
callback's CSS selector. Links are never followed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

import requests
from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "fetchmcp-collector/1.0"
_HTML_MEDIA_TYPES = ("text/html", "application/xhtml+xml")


class CollectorError(Exception):
    """Raised when a page visit fails."""


def declared_charset(content_type: str | None) -> str | None:
    """Return the ``charset`` parameter of a ``Content-Type`` header, if any."""
    if not content_type:
        return None
    for parameter in content_type.split(";")[1:]:
        key, _, value = parameter.partition("=")
        if key.strip().lower() == "charset" and value.strip(" \"'"):
            return value.strip(" \"'")
    return None


def parse_html(body: bytes, content_type: str | None = None) -> BeautifulSoup:
    """Parse raw response bytes.

    A charset declared in the header wins. Otherwise the body is read as
    UTF-8, and bodies that are not valid UTF-8 are left to BeautifulSoup,
    which honours a ``<meta>`` charset before guessing.
    """
    charset = declared_charset(content_type)
    if charset is None:
        try:
            return BeautifulSoup(body.decode("utf-8"), "html.parser")
        except UnicodeDecodeError:
            pass
    return BeautifulSoup(body, "html.parser", from_encoding=charset)


@dataclass(slots=True)
class HTMLElement:
    """An element matched by a collector callback."""

    tag: Tag
    request_url: str

    @property
    def name(self) -> str:
        return self.tag.name

    @property
    def text(self) -> str:
        return self.tag.get_text()

    def attr(self, key: str) -> str:
        value = self.tag.get(key)
        if value is None:
            return ""
        if isinstance(value, list):
            return " ".join(value)
        return value


HTMLCallback = Callable[[HTMLElement], None]


@dataclass
class Collector:
    """Fetch a page and dispatch matching elements to callbacks.

    Attributes:
        user_agent: ``User-Agent`` header sent with the visit.
        timeout: Request timeout in seconds; ``None`` waits indefinitely.
        allow_url_revisit: When False, visiting the same URL twice fails.
        session: Optional ``requests.Session`` used for the request.
    """

    user_agent: str = DEFAULT_USER_AGENT
    timeout: float | None = None
    allow_url_revisit: bool = True
    session: requests.Session | None = None
    _callbacks: list[tuple[str, HTMLCallback]] = field(default_factory=list, init=False, repr=False)
    _visited: set[str] = field(default_factory=set, init=False, repr=False)

    def on_html(self, selector: str, callback: HTMLCallback) -> None:
        """Register ``callback`` for elements matching ``selector``."""
        self._callbacks.append((selector, callback))

    def visit(self, url: str) -> None:
        """Fetch ``url`` and run the registered callbacks over its HTML.

        Raises:
            CollectorError: If the URL was already visited (when revisits are
                disabled), the request fails or the server answers with an
                error status.
        """
        if not self.allow_url_revisit and url in self._visited:
            raise CollectorError(f"URL already visited: {url}")
        self._visited.add(url)

        getter = self.session.get if self.session is not None else requests.get
        try:
            response = getter(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
                allow_redirects=True,
            )
        except requests.RequestException as exc:
            raise CollectorError(f"Request to {url} failed: {exc}") from exc

        # Only 200-202 count as a successful visit.
        if not 200 <= response.status_code < 203:
            raise CollectorError(f"HTTP {response.status_code} for {url}")

        content_type = (response.headers.get("Content-Type") or "").lower()
        if content_type and not any(media in content_type for media in _HTML_MEDIA_TYPES):
            logger.debug("Skipping HTML callbacks for %s (content type %s)", url, content_type)
            return

        soup = parse_html(response.content, content_type)
        for selector, callback in self._callbacks:
            for tag in soup.select(selector):
                callback(HTMLElement(tag=tag, request_url=url))


__all__ = [
    "Collector",
    "CollectorError",
    "DEFAULT_USER_AGENT",
    "HTMLElement",
    "declared_charset",
    "parse_html",
]
