"""In-process LRU cache of compile results.

Keyed by the entire raw source text: byte-identical documents share one entry
and any change to the source is a miss. Results are a pure function of the
source, so concurrent sets for the same key need no locking: any two writes
for one key are equivalent.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import TYPE_CHECKING

import structlog

from mdtovue.config import DEFAULT_CACHE_MAX_ENTRIES

if TYPE_CHECKING:
    from mdtovue.models import CompileResult

log = structlog.get_logger()


class CompileCache:
    """Capacity-bounded LRU mapping implementing CacheProtocol."""

    def __init__(self, max_entries: int = DEFAULT_CACHE_MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.max_entries = max_entries
        self._entries: OrderedDict[str, CompileResult] = OrderedDict()

    def get(self, source: str) -> CompileResult | None:
        """Return the cached result and mark it most recently used."""
        result = self._entries.get(source)
        if result is not None:
            self._entries.move_to_end(source)
        return result

    def set(self, source: str, result: CompileResult) -> None:
        self._entries[source] = result
        self._entries.move_to_end(source)
        while len(self._entries) > self.max_entries:
            _, evicted = self._entries.popitem(last=False)
            log.debug("cache_evicted", relative_path=evicted.page_data.relative_path)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, source: object) -> bool:
        return source in self._entries
