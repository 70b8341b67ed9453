"""GitHub integration helpers."""

from __future__ import annotations

from .docs import (
    DocFile,
    DocsDownloadError,
    DocsDownloader,
    DocsResult,
    fetch_docs,
    parse_repository_url,
)


__all__ = [
    "DocFile",
    "DocsDownloadError",
    "DocsDownloader",
    "DocsResult",
    "fetch_docs",
    "parse_repository_url",
]
