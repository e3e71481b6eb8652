"""GitHub Contents API client: list directories and read file bodies.

This module provides a small async client focused on the two operations
the transcript collector needs: listing a directory (Contents API) and
downloading a file body through its `download_url`. Any non-success
status is reported as "nothing here" (empty list / None) because most
requested paths legitimately do not exist. Transport failures and
undecodable replies raise `ExternalServiceError`.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx

from core.errors import ExternalServiceError
from core.models import RemoteEntry

from .inputs import is_absolute_url, normalize_path, parse_repo

logger = logging.getLogger(__name__)


class GitHubContentsClient:
    """Async GitHub client bound to one repository.

    Purpose:
      - list_directory(path_or_url) -> List[RemoteEntry]
      - get_entry(path) -> Optional[RemoteEntry]
      - fetch_file_body(entry) -> Optional[str]

    Key behavior:
      - Authenticates with a static bearer token when one is configured.
      - Requests are issued one at a time; no caching, no retries.
    """

    BASE_URL = "https://api.github.com"
    JSON_ACCEPT = "application/vnd.github+json"
    USER_AGENT = "github-chat-logger/1.0"

    def __init__(
        self,
        *,
        repo: str,
        token: Optional[str] = None,
        timeout: float = 20.0,
        verify: bool = True,
        base_url: Optional[str] = None,
    ) -> None:
        self._owner, self._repo = parse_repo(repo)
        self._timeout = float(timeout)
        self._verify = bool(verify)
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._headers = self._build_headers(token)

    @property
    def repo(self) -> str:
        return f"{self._owner}/{self._repo}"

    async def list_directory(self, path_or_url: str) -> List[RemoteEntry]:
        """List a repository path or a directory entry's API url (listing order kept)."""
        data = await self._contents(path_or_url)
        if data is None:
            return []

        # A file path yields a single object rather than an array
        items = data if isinstance(data, list) else [data]
        entries = [RemoteEntry.from_api(item) for item in items]
        return [e for e in entries if e is not None]

    async def get_entry(self, path: str) -> Optional[RemoteEntry]:
        """Return the entry for a single file path; directories and misses give None."""
        data = await self._contents(path)
        if not isinstance(data, dict):
            return None
        return RemoteEntry.from_api(data)

    async def fetch_file_body(self, entry: RemoteEntry) -> Optional[str]:
        """Download the raw body of a file entry, or None when it cannot be read."""
        if not entry.download_url:
            return None

        async with self._create_client() as client:
            resp = await self._get(client, entry.download_url)
            if not resp.is_success:
                logger.debug("Download of %s returned HTTP %s", entry.name, resp.status_code)
                return None
            return resp.text

    # --- HTTP helpers ---

    async def _contents(self, path_or_url: str) -> Any:
        # Decoded Contents API reply, or None for any non-success status
        async with self._create_client() as client:
            resp = await self._get(client, self._contents_url(path_or_url))
            if not resp.is_success:
                logger.debug("Listing %s returned HTTP %s", path_or_url, resp.status_code)
                return None
            return self._json(resp, context=f"list {path_or_url}")

    def _build_headers(self, token: Optional[str]) -> dict[str, str]:
        headers = {
            "Accept": self.JSON_ACCEPT,
            "User-Agent": self.USER_AGENT,
        }
        # Token is forwarded verbatim; unauthenticated access otherwise
        token_clean = (token or "").strip()
        if token_clean:
            headers["Authorization"] = f"Bearer {token_clean}"
        return headers

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=self._timeout,
            verify=self._verify,
            follow_redirects=True,
        )

    def _contents_url(self, path_or_url: str) -> str:
        if is_absolute_url(path_or_url):
            return path_or_url.strip()
        path_clean = quote(normalize_path(path_or_url), safe="/")
        return f"/repos/{self._owner}/{self._repo}/contents/{path_clean}"

    def _external(self, context: str, err: BaseException) -> ExternalServiceError:
        return ExternalServiceError(f"GitHub request failed ({context}): {err}")

    def _json(self, resp: httpx.Response, *, context: str) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise self._external(context, e) from e

    async def _get(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        try:
            return await client.get(url)
        except httpx.HTTPError as e:
            raise self._external(f"GET {url}", e) from e
