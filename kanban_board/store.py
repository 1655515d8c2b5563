"""
Board persistence: a single named key-value slot holding the board as JSON.

Backends:
  KanbanStore  - SQLite file (local, survives restarts)
  MemoryStore  - dict (ephemeral boards, tests)

Reads never raise: a missing, unreadable or malformed slot falls back to the
default board. Writes replace the slot's entire content.
"""
import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Optional

from .schema import Board

logger = logging.getLogger(__name__)

DEFAULT_SLOT = "board-state"


def _connect(db_path: str) -> sqlite3.Connection:
    """Open a connection in WAL mode."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode = WAL")
    return conn


class SlotStore(ABC):
    """Board load/save on top of a raw string slot. Subclasses provide the slot."""

    def __init__(
        self,
        slot: str = DEFAULT_SLOT,
        default_factory: Optional[Callable[[], Board]] = None,
    ):
        self.slot = slot
        self.default_factory = default_factory or Board.default

    @abstractmethod
    def read_slot(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def write_slot(self, key: str, value: str) -> None:
        ...

    def load(self) -> Board:
        """Load the board, substituting the default on any failure."""
        try:
            raw = self.read_slot(self.slot)
        except Exception as e:
            logger.warning(f"Could not read slot {self.slot!r}: {e}; using default board")
            return self.default_factory()

        if raw is None:
            logger.debug(f"Slot {self.slot!r} is empty; using default board")
            return self.default_factory()

        if not isinstance(raw, str):
            logger.warning(f"Slot {self.slot!r} holds {type(raw).__name__}, not text; using default board")
            return self.default_factory()

        # ValueError covers JSONDecodeError and BoardFormatError
        try:
            return Board.from_dict(json.loads(raw))
        except (ValueError, RecursionError) as e:
            logger.warning(f"Malformed board in slot {self.slot!r}: {e}; using default board")
            return self.default_factory()

    def save(self, board: Board) -> bool:
        """Write the full board. Returns False (and logs) if the write failed."""
        payload = json.dumps(board.to_dict())
        try:
            self.write_slot(self.slot, payload)
            return True
        except Exception as e:
            logger.error(f"Error saving board to slot {self.slot!r}: {e}")
            return False


class MemoryStore(SlotStore):
    """Dict-backed slots. Contents live as long as the instance."""

    def __init__(self, slot: str = DEFAULT_SLOT, default_factory=None, initial: Optional[Dict[str, str]] = None):
        super().__init__(slot, default_factory)
        self.slots: Dict[str, str] = dict(initial or {})
        self.writes = 0

    def read_slot(self, key: str) -> Optional[str]:
        return self.slots.get(key)

    def write_slot(self, key: str, value: str) -> None:
        self.slots[key] = value
        self.writes += 1


class KanbanStore(SlotStore):
    """SQLite-backed slots."""

    def __init__(self, db_path: str = None, slot: str = DEFAULT_SLOT, default_factory=None):
        """Initialize store and create the slots table if needed."""
        super().__init__(slot, default_factory)
        if db_path is None:
            db_path = str(Path.home() / ".local" / "share" / "kanban-board" / "board.db")
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    def _init_schema(self):
        with _connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS slots (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()

    def read_slot(self, key: str) -> Optional[str]:
        with _connect(self.db_path) as conn:
            row = conn.execute("SELECT value FROM slots WHERE key = ?", (key,)).fetchone()
        return row["value"] if row else None

    def write_slot(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with _connect(self.db_path) as conn:
            conn.execute(
                "INSERT OR REPLACE INTO slots (key, value, updated_at) VALUES (?, ?, ?)",
                (key, value, now),
            )
            conn.commit()

    def clear(self) -> None:
        """Drop the board slot; the next load returns the default board."""
        with _connect(self.db_path) as conn:
            conn.execute("DELETE FROM slots WHERE key = ?", (self.slot,))
            conn.commit()
