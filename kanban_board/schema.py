"""
Kanban board schema.

Board -> ordered Columns -> ordered Cards. Order is the visual top-to-bottom
(cards) and left-to-right (columns) position. Card ids are unique across the
whole board; column ids are unique within it.

Serialized form (one JSON value per slot):
  { "columns": [ { "id", "title", "cards": [ { "id", "text" } ] } ] }
"""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Iterable, Tuple, Set
import random
import string
import time


DEFAULT_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("col-1", "To Do"),
    ("col-2", "In Progress"),
    ("col-3", "Done"),
)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_card_id() -> str:
    """Fresh card id, e.g. card-1760812345678-k3x9a0q."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=7))
    return f"card-{int(time.time() * 1000)}-{suffix}"


class BoardFormatError(ValueError):
    """Raised when a serialized board does not have the expected shape."""
    pass


@dataclass
class Card:
    """A single card. Text is always trimmed and non-empty."""

    card_id: str
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.card_id, "text": self.text}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Card":
        if not isinstance(data, dict):
            raise BoardFormatError(f"card must be an object, got {type(data).__name__}")
        card_id = data.get("id")
        text = data.get("text")
        if not isinstance(card_id, str) or not card_id:
            raise BoardFormatError(f"card id must be a non-empty string: {card_id!r}")
        if not isinstance(text, str) or not text.strip():
            raise BoardFormatError(f"card {card_id} has empty text")
        return cls(card_id=card_id, text=text.strip())


@dataclass
class Column:
    """An ordered list of cards under a title."""

    column_id: str
    title: str
    cards: List[Card] = field(default_factory=list)

    def index_of(self, card_id: str) -> int:
        """Position of card_id in this column, or -1."""
        for i, card in enumerate(self.cards):
            if card.card_id == card_id:
                return i
        return -1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.column_id,
            "title": self.title,
            "cards": [c.to_dict() for c in self.cards],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Column":
        if not isinstance(data, dict):
            raise BoardFormatError(f"column must be an object, got {type(data).__name__}")
        column_id = data.get("id")
        title = data.get("title", "")
        cards = data.get("cards", [])
        if not isinstance(column_id, str) or not column_id:
            raise BoardFormatError(f"column id must be a non-empty string: {column_id!r}")
        if not isinstance(title, str):
            raise BoardFormatError(f"column {column_id} title must be a string")
        if not isinstance(cards, list):
            raise BoardFormatError(f"column {column_id} cards must be a list")
        return cls(
            column_id=column_id,
            title=title,
            cards=[Card.from_dict(c) for c in cards],
        )


@dataclass
class Board:
    """The whole board: columns in display order."""

    columns: List[Column] = field(default_factory=list)

    @classmethod
    def default(cls, columns: Optional[Iterable[Tuple[str, str]]] = None) -> "Board":
        """Empty board with the given (id, title) columns, or To Do / In Progress / Done."""
        pairs = DEFAULT_COLUMNS if columns is None else columns
        return cls(columns=[Column(column_id=cid, title=title) for cid, title in pairs])

    # -------------------- queries --------------------

    def column(self, column_id: str) -> Optional[Column]:
        for col in self.columns:
            if col.column_id == column_id:
                return col
        return None

    def locate(self, card_id: str) -> Optional[Tuple[Column, int]]:
        """Find (column, index) holding card_id."""
        for col in self.columns:
            idx = col.index_of(card_id)
            if idx != -1:
                return col, idx
        return None

    def card_ids(self) -> List[str]:
        return [card.card_id for col in self.columns for card in col.cards]

    def card_count(self) -> int:
        return sum(len(col.cards) for col in self.columns)

    def copy(self) -> "Board":
        return Board(columns=[
            Column(
                column_id=col.column_id,
                title=col.title,
                cards=[Card(card_id=c.card_id, text=c.text) for c in col.cards],
            )
            for col in self.columns
        ])

    # -------------------- serialization --------------------

    def to_dict(self) -> Dict[str, Any]:
        return {"columns": [col.to_dict() for col in self.columns]}

    @classmethod
    def from_dict(cls, data: Any) -> "Board":
        """Deserialize and validate. Raises BoardFormatError on any malformed input."""
        if not isinstance(data, dict):
            raise BoardFormatError(f"board must be an object, got {type(data).__name__}")
        raw_columns = data.get("columns")
        if not isinstance(raw_columns, list):
            raise BoardFormatError("board.columns must be a list")

        board = cls(columns=[Column.from_dict(c) for c in raw_columns])

        seen_columns: Set[str] = set()
        seen_cards: Set[str] = set()
        for col in board.columns:
            if col.column_id in seen_columns:
                raise BoardFormatError(f"duplicate column id {col.column_id}")
            seen_columns.add(col.column_id)
            for card in col.cards:
                if card.card_id in seen_cards:
                    raise BoardFormatError(f"duplicate card id {card.card_id}")
                seen_cards.add(card.card_id)
        return board
