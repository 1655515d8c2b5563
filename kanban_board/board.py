"""
BoardState: owns the board and applies mutations.

Every applied mutation is written through to the store (full board) and then
announced as board_changed with a snapshot. No-ops (unknown ids, empty text,
unchanged values, same-slot moves) touch neither.
"""
import logging
from typing import Callable, Optional, Tuple

from .events import EventBus, BOARD_CHANGED
from .schema import Board, Card, Column, generate_card_id
from .store import SlotStore

logger = logging.getLogger(__name__)


class BoardState:
    """Mutable board plus its persistence slot."""

    def __init__(
        self,
        store: SlotStore,
        bus: Optional[EventBus] = None,
        id_factory: Callable[[], str] = generate_card_id,
    ):
        self.store = store
        self.bus = bus or EventBus()
        self.id_factory = id_factory
        self.board: Board = store.load()

    # -------------------- persistence --------------------

    def load(self) -> Board:
        """Reload from the store (default board on any failure)."""
        self.board = self.store.load()
        return self.board

    def save(self, board: Optional[Board] = None) -> bool:
        """Persist the given board (or the current one) and make a copy of it current."""
        if board is not None:
            self.board = board.copy()
        return self.store.save(self.board)

    def _commit(self) -> None:
        self.save()
        self.bus.emit(BOARD_CHANGED, board=self.snapshot())

    # -------------------- queries --------------------

    def snapshot(self) -> Board:
        """Deep copy of the board; mutating it has no effect on state."""
        return self.board.copy()

    def column(self, column_id: str) -> Optional[Column]:
        return self.board.column(column_id)

    def find_card(self, card_id: str) -> Optional[Tuple[Column, int]]:
        return self.board.locate(card_id)

    def card_count(self) -> int:
        return self.board.card_count()

    # -------------------- mutations --------------------

    def _fresh_id(self) -> str:
        taken = set(self.board.card_ids())
        card_id = self.id_factory()
        while card_id in taken:
            card_id = self.id_factory()
        return card_id

    def add_card(self, column_id: str, text: str) -> Optional[Card]:
        """Append a new card to the column. None if text is blank or the column unknown."""
        text = (text or "").strip()
        if not text:
            return None
        column = self.board.column(column_id)
        if column is None:
            logger.debug(f"add_card: unknown column {column_id}")
            return None

        card = Card(card_id=self._fresh_id(), text=text)
        column.cards.append(card)
        logger.info(f"Added {card.card_id} to {column_id}")
        self._commit()
        return card

    def delete_card(self, card_id: str) -> Optional[Card]:
        """Remove the card from whichever column holds it."""
        found = self.board.locate(card_id)
        if found is None:
            logger.debug(f"delete_card: {card_id} not found")
            return None
        column, idx = found
        card = column.cards.pop(idx)
        logger.info(f"Deleted {card_id} from {column.column_id}")
        self._commit()
        return card

    def edit_card(self, card_id: str, new_text: str) -> bool:
        """Replace the card's text with the trimmed value if non-empty and different."""
        found = self.board.locate(card_id)
        if found is None:
            logger.debug(f"edit_card: {card_id} not found")
            return False
        column, idx = found
        card = column.cards[idx]

        text = (new_text or "").strip()
        if not text or text == card.text:
            return False

        card.text = text
        logger.info(f"Edited {card_id}")
        self._commit()
        return True

    def move_card(self, card_id: str, target_column_id: str, target_index: int) -> bool:
        """
        Move a card to target_column_id at target_index.

        The index is clamped to [0, len(target.cards)] measured after the card
        is removed. Unknown card or column is a full no-op. Landing on the
        card's current slot is also a no-op (no save, no signal).

        Returns True if the card moved.
        """
        found = self.board.locate(card_id)
        target = self.board.column(target_column_id)
        if found is None or target is None:
            logger.debug(f"move_card: no-op for {card_id} -> {target_column_id}")
            return False

        source, source_idx = found
        remaining = len(target.cards) - (1 if target is source else 0)
        index = max(0, min(target_index, remaining))
        if target is source and index == source_idx:
            return False

        card = source.cards.pop(source_idx)
        target.cards.insert(index, card)
        logger.info(
            f"Moved {card_id} from {source.column_id}[{source_idx}] "
            f"to {target_column_id}[{index}]"
        )
        self._commit()
        return True
