"""
Graphic History - recent graphics per browser session, in memory only.

Mirrors the gallery the UI keeps: newest first, capped per session.
Entries expire after TTL; everything is lost on restart.
"""
import asyncio
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, List

from config import settings
from models.graphic import GeneratedGraphic

logger = logging.getLogger(__name__)

DEFAULT_SESSION = "default"


@dataclass
class HistoryEntry:
    graphic: GeneratedGraphic
    stored_at: float = field(default_factory=time.time)


class GraphicHistory:
    """Per-session, bounded, TTL'd history of generated graphics.

    - Each session keeps at most ``max_entries`` graphics (oldest dropped)
    - Entries older than ``ttl_seconds`` are dropped on read
    - Sessions are kept in LRU order; the least recently used session is
      evicted once more than ``max_sessions`` exist
    """

    def __init__(self, ttl_seconds: int = 1800, max_entries: int = 20, max_sessions: int = 1000):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, List[HistoryEntry]]" = OrderedDict()
        self._lock = asyncio.Lock()

    def _expired(self, entry: HistoryEntry, now: float) -> bool:
        return now - entry.stored_at > self.ttl_seconds

    async def add(self, graphic: GeneratedGraphic, session_id: str = DEFAULT_SESSION) -> None:
        """Store a graphic at the front of the session's history."""
        async with self._lock:
            entries = self._sessions.setdefault(session_id, [])
            entries.insert(0, HistoryEntry(graphic=graphic))
            del entries[self.max_entries:]
            self._sessions.move_to_end(session_id)

            # Evict least recently used sessions when over capacity
            while len(self._sessions) > self.max_sessions:
                self._sessions.popitem(last=False)

    async def list(self, session_id: str = DEFAULT_SESSION) -> List[GeneratedGraphic]:
        """Graphics for a session, newest first."""
        async with self._lock:
            entries = self._sessions.get(session_id)
            if not entries:
                return []

            now = time.time()
            live = [e for e in entries if not self._expired(e, now)]
            if len(live) != len(entries):
                logger.debug(f"[HISTORY] Dropped {len(entries) - len(live)} expired entries for session={session_id}")
            if live:
                self._sessions[session_id] = live
                self._sessions.move_to_end(session_id)
            else:
                del self._sessions[session_id]

            return [e.graphic for e in live]

    async def clear(self, session_id: str = DEFAULT_SESSION) -> int:
        """Clear a session. Returns count removed."""
        async with self._lock:
            entries = self._sessions.pop(session_id, [])
            return len(entries)

    async def cleanup_expired(self) -> int:
        """Remove all expired entries across sessions. Returns count removed."""
        async with self._lock:
            now = time.time()
            removed = 0
            for session_id in list(self._sessions):
                entries = self._sessions[session_id]
                live = [e for e in entries if not self._expired(e, now)]
                removed += len(entries) - len(live)
                if live:
                    self._sessions[session_id] = live
                else:
                    del self._sessions[session_id]
            return removed

    def stats(self) -> Dict[str, Any]:
        """Get history statistics."""
        return {
            "sessions": len(self._sessions),
            "total_entries": sum(len(v) for v in self._sessions.values()),
            "max_entries": self.max_entries,
            "max_sessions": self.max_sessions,
            "ttl_seconds": self.ttl_seconds,
        }


# Singleton instance
graphic_history = GraphicHistory(
    ttl_seconds=settings.history_ttl_seconds,
    max_entries=settings.history_max_entries,
    max_sessions=settings.history_max_sessions,
)
