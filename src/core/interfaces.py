"""Core protocol and interface definitions.

Defines the ContentLister protocol the transcript collector walks, so
the GitHub client (or a test double) can be plugged in uniformly.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from core.models import RemoteEntry


class ContentLister(Protocol):
    """Contract for a remote repository content listing."""
    async def list_directory(self, path_or_url: str) -> List[RemoteEntry]:
        ...

    async def get_entry(self, path: str) -> Optional[RemoteEntry]:
        ...

    async def fetch_file_body(self, entry: RemoteEntry) -> Optional[str]:
        ...
