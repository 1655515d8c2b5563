"""
Layout geometry: bounding boxes and the oracle the drag engine queries.

The core never owns the rendered layout. It asks a LayoutOracle for the
rendered column order, the rendered cards per column and their boxes, and
re-asks on every pointer event because the layout changes under the drag
(placeholder inserted, cards shifted).
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

from .schema import Board


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box in screen coordinates (y grows downward)."""

    left: float
    right: float
    top: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def mid_y(self) -> float:
        return self.top + self.height / 2

    def contains(self, x: float, y: float) -> bool:
        """Inclusive on all edges."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom


class LayoutOracle(Protocol):
    """Read-only view of the current rendered layout."""

    def column_ids(self) -> Sequence[str]:
        """Rendered columns, left to right."""
        ...

    def column_rect(self, column_id: str) -> Optional[Rect]:
        """Box of the column's card area, or None if not rendered."""
        ...

    def card_ids(self, column_id: str) -> Sequence[str]:
        """Rendered cards of the column, top to bottom, placeholder excluded."""
        ...

    def card_rect(self, card_id: str) -> Optional[Rect]:
        """Box of a rendered card, or None if not rendered."""
        ...


class StaticLayout:
    """LayoutOracle over fixed, hand-supplied boxes."""

    def __init__(self):
        self._column_order: List[str] = []
        self._column_rects: Dict[str, Rect] = {}
        self._cards: Dict[str, List[str]] = {}
        self._card_rects: Dict[str, Rect] = {}

    def add_column(self, column_id: str, rect: Rect) -> None:
        if column_id not in self._column_rects:
            self._column_order.append(column_id)
            self._cards[column_id] = []
        self._column_rects[column_id] = rect

    def add_card(self, column_id: str, card_id: str, rect: Rect) -> None:
        self._cards[column_id].append(card_id)
        self._card_rects[card_id] = rect

    # LayoutOracle

    def column_ids(self) -> Sequence[str]:
        return list(self._column_order)

    def column_rect(self, column_id: str) -> Optional[Rect]:
        return self._column_rects.get(column_id)

    def card_ids(self, column_id: str) -> Sequence[str]:
        return list(self._cards.get(column_id, []))

    def card_rect(self, card_id: str) -> Optional[Rect]:
        return self._card_rects.get(card_id)

    @classmethod
    def from_board(
        cls,
        board: Board,
        column_width: float = 200,
        column_gap: float = 20,
        column_height: float = 600,
        card_height: float = 40,
        card_gap: float = 10,
        gap_at: Optional[Tuple[str, int, float]] = None,
    ) -> "StaticLayout":
        """
        Lay the board out as a grid: columns side by side from x=0, cards
        stacked from the column top.

        gap_at=(column_id, index, height) leaves a placeholder gap before the
        card at index, shifting that card and everything below it down.
        """
        layout = cls()
        for i, col in enumerate(board.columns):
            left = i * (column_width + column_gap)
            right = left + column_width
            layout.add_column(col.column_id, Rect(left, right, 0, column_height))
            y = card_gap
            for j, card in enumerate(col.cards):
                if gap_at and gap_at[0] == col.column_id and gap_at[1] == j:
                    y += gap_at[2] + card_gap
                layout.add_card(col.column_id, card.card_id, Rect(left, right, y, y + card_height))
                y += card_height + card_gap
        return layout
