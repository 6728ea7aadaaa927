from __future__ import annotations

import asyncio
import os

from mdtovue.errors import MissingFileError


class OsFileStat:
    """FileStatProtocol implementation backed by ``os.stat``."""

    async def modified_time_ms(self, path: str) -> int:
        try:
            stat = await asyncio.to_thread(os.stat, path)
        except FileNotFoundError as exc:
            raise MissingFileError(f"File not found: {path}") from exc
        # Round half up to whole milliseconds.
        return (stat.st_mtime_ns + 500_000) // 1_000_000
