"""Transcript retrieval over the fixed repository layout.

Layout walked (nothing deeper is discovered):

    transcripts/latest.md
    transcripts/<project>/latest.md
    transcripts/<project>/<YYYY>/<date>/*.md

Every lookup that fails is logged and skipped; whatever was collected so
far is kept and the walk moves on to the next branch.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from core.errors import ExternalServiceError
from core.interfaces import ContentLister
from core.models import RemoteEntry
from core.paths import join_posix, normalize_posix_relpath

logger = logging.getLogger(__name__)

_YEAR_RE = re.compile(r"^\d{4}$")

LATEST_NAME = "latest.md"


def _location(entry: RemoteEntry) -> str:
    # API url when the listing supplied one, repository path otherwise
    return entry.url or entry.path or entry.name


class TranscriptCollector:
    def __init__(
        self,
        *,
        lister: ContentLister,
        root: str = "transcripts",
        suffix: str = ".md",
    ) -> None:
        self._lister = lister
        self._root = normalize_posix_relpath(root)
        self._suffix = suffix

    async def retrieve(self, project: Optional[str] = None) -> List[str]:
        """Collect transcript bodies in discovery order (no sorting, duplicates kept)."""
        transcripts: List[str] = []
        project_clean = normalize_posix_relpath(project or "")

        await self._collect_latest(join_posix(self._root, LATEST_NAME), transcripts)

        if project_clean:
            project_dir = join_posix(self._root, project_clean)
            await self._collect_latest(join_posix(project_dir, LATEST_NAME), transcripts)
            await self._collect_archive(project_dir, transcripts)

        return transcripts

    async def _collect_latest(self, path: str, out: List[str]) -> None:
        try:
            entry = await self._lister.get_entry(path)
            if entry is None:
                return
            body = await self._lister.fetch_file_body(entry)
        except ExternalServiceError as e:
            logger.warning("Error fetching %s: %s", path, e)
            return

        if body is not None:
            out.append(body)

    async def _collect_archive(self, project_dir: str, out: List[str]) -> None:
        try:
            entries = await self._lister.list_directory(project_dir)
        except ExternalServiceError as e:
            logger.warning("Error browsing %s: %s", project_dir, e)
            return

        # Only year folders ("2025") are archives; anything else is ignored
        for item in entries:
            if item.is_dir and _YEAR_RE.match(item.name):
                await self._collect_year(item, out)

    async def _collect_year(self, year: RemoteEntry, out: List[str]) -> None:
        try:
            entries = await self._lister.list_directory(_location(year))
        except ExternalServiceError as e:
            logger.warning("Error listing year folder %s: %s", year.name, e)
            return

        # Every sub-directory is treated as a date folder; its name is not checked
        for item in entries:
            if item.is_dir:
                await self._collect_date(item, out)

    async def _collect_date(self, date: RemoteEntry, out: List[str]) -> None:
        try:
            entries = await self._lister.list_directory(_location(date))
        except ExternalServiceError as e:
            logger.warning("Error listing date folder %s: %s", date.name, e)
            return

        for item in entries:
            if not (item.name.endswith(self._suffix) and item.download_url):
                continue
            try:
                body = await self._lister.fetch_file_body(item)
            except ExternalServiceError as e:
                logger.warning("Error fetching transcript %s: %s", item.name, e)
                continue
            if body is not None:
                out.append(body)
