# Kanban board - configuration
# Override storage location, slot and default columns via YAML or CLI args.

import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from .schema import Board, DEFAULT_COLUMNS

CONFIG_PATH = Path(__file__).parent.parent / "config" / "kanban_board.yaml"


def _default_columns() -> List[Dict[str, str]]:
    return [{"id": cid, "title": title} for cid, title in DEFAULT_COLUMNS]


@dataclass
class Config:
    """Runtime configuration for the board."""

    # Storage
    db_path: str = "~/.local/share/kanban-board/board.db"
    slot: str = "board-state"

    # Fallback board when the slot is empty or unreadable
    columns: List[Dict[str, Any]] = field(default_factory=_default_columns)

    log_level: str = "INFO"

    def resolve_paths(self):
        """Apply KANBAN_BOARD_DB and expand ~."""
        env_db = os.environ.get("KANBAN_BOARD_DB")
        if env_db:
            self.db_path = env_db
        self.db_path = str(Path(self.db_path).expanduser())

    def _check_columns(self):
        if not isinstance(self.columns, list):
            raise ValueError("columns must be a list")
        ids = []
        for col in self.columns:
            if not isinstance(col, dict) or not col.get("id"):
                raise ValueError(f"column entry needs an id: {col!r}")
            ids.append(str(col["id"]))
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate column ids")

    def default_board(self) -> Board:
        return Board.default((str(c["id"]), str(c.get("title", ""))) for c in self.columns)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        """Load config from YAML file, falling back to defaults."""
        cfg_path = Path(path) if path else CONFIG_PATH
        if cfg_path.exists():
            try:
                with open(cfg_path, "r") as f:
                    data = yaml.safe_load(f) or {}
                known = {f.name for f in fields(cls)}
                cfg = cls(**{k: v for k, v in data.items() if k in known})
                cfg._check_columns()
            except Exception:
                cfg = cls()
        else:
            cfg = cls()
        cfg.resolve_paths()
        return cfg
