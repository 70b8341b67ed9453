"""Download documentation files from a GitHub repository."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Sequence
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"
DEFAULT_EXTENSIONS = (".md", ".txt")
DEFAULT_MAX_FILES = 50
MARKDOWN_CONTENT_LIMIT = 2000


class DocsDownloadError(RuntimeError):
    """Raised when repository documents cannot be listed."""


@dataclass(slots=True)
class DocFile:
    path: str
    content: str


@dataclass(slots=True)
class DocsResult:
    """Documents collected from a repository."""

    repo_url: str
    owner: str = ""
    repo: str = ""
    files: list[DocFile] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.files)

    def to_dict(self) -> dict[str, Any]:
        return {
            "repo_url": self.repo_url,
            "owner": self.owner,
            "repo": self.repo,
            "count": self.count,
            "files": [asdict(doc) for doc in self.files],
        }

    def to_markdown(self) -> str:
        """Render every file as a fenced section under a repository heading."""
        lines = [f"# {self.owner}/{self.repo}\n\n", f"{self.count} documentation files\n\n"]
        for doc in self.files:
            content = doc.content
            if len(content) > MARKDOWN_CONTENT_LIMIT:
                content = content[:MARKDOWN_CONTENT_LIMIT] + "\n... (content truncated)"
            lines.append(f"## {doc.path}\n\n```\n{content}\n```\n\n")
        return "".join(lines)


def parse_repository_url(repo_url: str) -> tuple[str, str]:
    """Extract ``(owner, repo)`` from a ``github.com`` URL.

    Returns empty strings when the URL does not name a GitHub repository.
    """
    _, sep, remainder = repo_url.partition("github.com/")
    if not sep:
        return "", ""
    parts = remainder.strip("/").removesuffix(".git").split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return "", ""
    return parts[0], parts[1].removesuffix(".git")


@dataclass
class DocsDownloader:
    """Collect text documents from the default branch of a repository.

    Attributes:
        repo_url: Repository URL, e.g. ``https://github.com/owner/repo``.
        path: Optional directory (or file) filter relative to the root.
        extensions: Lower-case file extensions to keep.
        max_files: Stop after this many documents.
        token: Optional GitHub token; raises the API rate limit.
    """

    repo_url: str
    path: str = ""
    extensions: Sequence[str] = DEFAULT_EXTENSIONS
    max_files: int = DEFAULT_MAX_FILES
    token: str | None = None
    api_url: str = DEFAULT_API_URL
    timeout: float = 30

    def _headers(self, accept: str) -> dict[str, str]:
        headers = {"Accept": accept, "X-GitHub-Api-Version": API_VERSION}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def should_include(self, filename: str) -> bool:
        path_filter = self.path.strip("/")
        if path_filter and filename != path_filter and not filename.startswith(path_filter + "/"):
            return False
        _, dot, ext = filename.rpartition(".")
        if not dot or "/" in ext:
            return False
        return f".{ext.lower()}" in self.extensions

    def _list_tree(self, owner: str, repo: str) -> list[dict[str, Any]]:
        endpoint = f"{self.api_url.rstrip('/')}/repos/{owner}/{repo}/git/trees/HEAD"
        try:
            response = requests.get(
                endpoint,
                params={"recursive": "1"},
                headers=self._headers("application/vnd.github+json"),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DocsDownloadError(f"list tree failed: {exc}") from exc
        try:
            payload = response.json()
        except ValueError as exc:
            raise DocsDownloadError(f"list tree failed: invalid JSON response: {exc}") from exc
        if not isinstance(payload, dict) or not isinstance(payload.get("tree", []), list):
            raise DocsDownloadError("list tree failed: unexpected response shape")
        if payload.get("truncated"):
            logger.warning("Tree listing for %s/%s was truncated by the API", owner, repo)
        return [entry for entry in payload.get("tree", []) if isinstance(entry, dict)]

    def _read_file(self, owner: str, repo: str, path: str) -> str | None:
        endpoint = f"{self.api_url.rstrip('/')}/repos/{owner}/{repo}/contents/{quote(path)}"
        try:
            response = requests.get(
                endpoint,
                headers=self._headers("application/vnd.github.raw+json"),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Skipping %s: %s", path, exc)
            return None
        return response.text

    def fetch(self) -> DocsResult:
        """Download matching documents.

        Raises:
            DocsDownloadError: If the URL is missing or not a GitHub
                repository, or the tree cannot be listed.
        """
        if not self.repo_url:
            raise DocsDownloadError("repository URL is required")
        owner, repo = parse_repository_url(self.repo_url)
        if not owner:
            raise DocsDownloadError(f"not a GitHub repository URL: {self.repo_url}")

        result = DocsResult(repo_url=self.repo_url, owner=owner, repo=repo)
        for entry in self._list_tree(owner, repo):
            if len(result.files) >= self.max_files:
                break
            path = entry.get("path")
            if entry.get("type") != "blob" or not isinstance(path, str) or not self.should_include(path):
                continue
            content = self._read_file(owner, repo, path)
            if content is None:
                continue
            result.files.append(DocFile(path=path, content=content))

        logger.info("Downloaded %d documents from %s/%s", result.count, owner, repo)
        return result


def fetch_docs(
    repo_url: str,
    path: str | None = None,
    *,
    token: str | None = None,
    api_url: str = DEFAULT_API_URL,
) -> DocsResult:
    """Convenience wrapper around :class:`DocsDownloader`."""
    return DocsDownloader(repo_url=repo_url, path=path or "", token=token, api_url=api_url).fetch()


__all__ = [
    "DocFile",
    "DocsDownloadError",
    "DocsDownloader",
    "DocsResult",
    "fetch_docs",
    "parse_repository_url",
]
