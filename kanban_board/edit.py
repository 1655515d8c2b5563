"""
Inline edit session for a single card.

begin() hands the presentation layer the text to seed its field with.
commit()/blur() write the field's value through BoardState.edit_card;
cancel() discards it. Every path ends the session.
"""
import logging
from typing import Optional

from .board import BoardState

logger = logging.getLogger(__name__)


class EditSession:
    """At most one card in edit mode at a time."""

    def __init__(self, board: BoardState):
        self.board = board
        self.card_id: Optional[str] = None
        self.original_text: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.card_id is not None

    def begin(self, card_id: str) -> Optional[str]:
        """Enter edit mode. Returns the seed text, or None if ignored."""
        if self.is_active:
            return None
        found = self.board.find_card(card_id)
        if found is None:
            logger.debug(f"edit begin ignored: {card_id} not found")
            return None
        column, idx = found
        self.card_id = card_id
        self.original_text = column.cards[idx].text
        return self.original_text

    def commit(self, text: str) -> bool:
        """Explicit submit. Returns True if the card text changed."""
        if not self.is_active:
            return False
        card_id = self.card_id
        self._end()
        return self.board.edit_card(card_id, text)

    def blur(self, text: str) -> bool:
        """Focus left the field; same as submit."""
        return self.commit(text)

    def cancel(self) -> None:
        self._end()

    def _end(self) -> None:
        self.card_id = None
        self.original_text = None
