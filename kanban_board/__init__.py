# Kanban board: board state, persistence and drag-and-drop reordering
#
# Components:
#   schema.py   - Data model (Card, Column, Board) and serialization
#   store.py    - Key-value slot persistence (SQLite + in-memory)
#   board.py    - BoardState: add / delete / edit / move with write-through
#   events.py   - Signal bus between the core and the presentation layer
#   geometry.py - Bounding boxes and the LayoutOracle protocol
#   drag.py     - DragController: pointer-driven reorder engine
#   edit.py     - Inline edit session
#   config.py   - YAML configuration
#   cli.py      - Command line entry point

from .schema import Board, Card, Column, BoardFormatError
from .store import KanbanStore, MemoryStore
from .board import BoardState
from .events import EventBus
from .geometry import Rect, StaticLayout
from .drag import DragController, DragPhase, DropTarget, DropOutcome
from .edit import EditSession

__all__ = [
    "Board",
    "Card",
    "Column",
    "BoardFormatError",
    "KanbanStore",
    "MemoryStore",
    "BoardState",
    "EventBus",
    "Rect",
    "StaticLayout",
    "DragController",
    "DragPhase",
    "DropTarget",
    "DropOutcome",
    "EditSession",
]
