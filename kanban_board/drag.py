"""
Drag-and-drop reorder engine.

State machine:
  IDLE -> DRAGGING   pointer_down on a card (ignored unless IDLE)
  DRAGGING           pointer_move: hit-test, update placeholder
  DRAGGING -> DROPPING -> IDLE
                     pointer_up: resolve target, at most one move_card

Layout indices count every rendered card in the column, the dragged card
included (it stays rendered, hidden, until the drop). The slot directly
above and the slot directly below the dragged card both mean "where it
already is": no placeholder, and dropping there changes nothing.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import BoardState
from .events import EventBus, DRAG_START, DRAG_UPDATE, DRAG_END
from .geometry import LayoutOracle

logger = logging.getLogger(__name__)


class DragPhase(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    DROPPING = "dropping"


@dataclass(frozen=True)
class DropTarget:
    """Where a drag would land: (column_id, index) in layout space."""

    column_id: Optional[str] = None
    index: int = -1

    @property
    def is_valid(self) -> bool:
        return self.column_id is not None and self.index >= 0


NO_TARGET = DropTarget()


@dataclass
class DragSession:
    """Everything captured at pointer-down plus the live hover state."""

    card_id: str
    source_column_id: str
    source_index: int
    offset_x: float
    offset_y: float
    card_height: float
    pointer_x: float
    pointer_y: float
    hover: Optional[DropTarget] = None
    placeholder: Optional[DropTarget] = None

    @property
    def ghost_origin(self) -> Tuple[float, float]:
        """Top-left corner of the ghost following the pointer."""
        return self.pointer_x - self.offset_x, self.pointer_y - self.offset_y

    def is_origin(self, target: DropTarget) -> bool:
        return (
            target.column_id == self.source_column_id
            and target.index in (self.source_index, self.source_index + 1)
        )

    def commit_index(self, target: DropTarget) -> int:
        """Translate a layout index to the index after the card is removed."""
        if target.column_id == self.source_column_id and target.index > self.source_index:
            return target.index - 1
        return target.index


@dataclass(frozen=True)
class DropOutcome:
    card_id: str
    target: DropTarget
    moved: bool

    @property
    def cancelled(self) -> bool:
        return not self.target.is_valid


class DragController:
    """Consumes pointer signals, queries the layout, commits one move per drag."""

    def __init__(self, board: BoardState, layout: LayoutOracle, bus: Optional[EventBus] = None):
        self.board = board
        self.layout = layout
        self.bus = bus or board.bus
        self.phase = DragPhase.IDLE
        self.session: Optional[DragSession] = None

    @property
    def is_dragging(self) -> bool:
        return self.phase is not DragPhase.IDLE

    # -------------------- hit-testing --------------------

    def find_drop_target(self, x: float, y: float) -> DropTarget:
        """Column under (x, y), then insert before the first card whose midpoint is below y."""
        for column_id in self.layout.column_ids():
            rect = self.layout.column_rect(column_id)
            if rect is None or not rect.contains(x, y):
                continue

            card_ids = self.layout.card_ids(column_id)
            for index, card_id in enumerate(card_ids):
                card_rect = self.layout.card_rect(card_id)
                if card_rect is not None and y < card_rect.mid_y:
                    return DropTarget(column_id, index)
            return DropTarget(column_id, len(card_ids))
        return NO_TARGET

    # -------------------- pointer signals --------------------

    def pointer_down(
        self,
        card_id: str,
        column_id: str,
        x: float,
        y: float,
        click_count: int = 1,
        on_delete_control: bool = False,
    ) -> bool:
        """Start a drag. Returns False if the press was ignored."""
        if self.phase is not DragPhase.IDLE:
            logger.debug(f"pointer_down on {card_id} ignored: drag already active")
            return False
        if on_delete_control or click_count >= 2:
            return False

        found = self.board.find_card(card_id)
        if found is None or found[0].column_id != column_id:
            logger.debug(f"pointer_down on {card_id} ignored: not in column {column_id}")
            return False

        rendered = list(self.layout.card_ids(column_id))
        rect = self.layout.card_rect(card_id)
        if rect is None or card_id not in rendered:
            logger.debug(f"pointer_down on {card_id} ignored: card not rendered")
            return False

        self.session = DragSession(
            card_id=card_id,
            source_column_id=column_id,
            source_index=rendered.index(card_id),
            offset_x=x - rect.left,
            offset_y=y - rect.top,
            card_height=rect.height,
            pointer_x=x,
            pointer_y=y,
        )
        self.phase = DragPhase.DRAGGING
        self.bus.emit(
            DRAG_START,
            card_id=card_id,
            column_id=column_id,
            index=self.session.source_index,
        )
        return True

    def pointer_move(self, x: float, y: float) -> Optional[DropTarget]:
        """Track the pointer; returns the current drop target (None when idle)."""
        if self.phase is not DragPhase.DRAGGING:
            return None

        session = self.session
        session.pointer_x, session.pointer_y = x, y
        target = self.find_drop_target(x, y)
        session.hover = target

        if target.is_valid and not session.is_origin(target):
            self._set_placeholder(target)
        else:
            self._set_placeholder(None)
        return target

    def pointer_up(self, x: float, y: float) -> Optional[DropOutcome]:
        """Finish the drag: move on a valid target, revert otherwise. Always ends IDLE."""
        if self.phase is not DragPhase.DRAGGING:
            return None

        session = self.session
        self.phase = DragPhase.DROPPING
        session.pointer_x, session.pointer_y = x, y
        target = self.find_drop_target(x, y)
        session.hover = target
        moved = False

        try:
            if target.is_valid:
                moved = self.board.move_card(
                    session.card_id, target.column_id, session.commit_index(target)
                )
                if moved:
                    logger.info(f"Dropped {session.card_id} on {target.column_id}[{target.index}]")
            else:
                logger.debug(f"Drag of {session.card_id} cancelled: dropped outside columns")
        finally:
            self.session = None
            self.phase = DragPhase.IDLE
            self.bus.emit(DRAG_END, card_id=session.card_id, moved=moved)

        return DropOutcome(card_id=session.card_id, target=target, moved=moved)

    # -------------------- placeholder --------------------

    def _set_placeholder(self, target: Optional[DropTarget]) -> None:
        session = self.session
        if target == session.placeholder:
            return
        session.placeholder = target
        if target is None:
            self.bus.emit(DRAG_UPDATE, column_id=None, index=None, height=session.card_height)
        else:
            logger.debug(f"Placeholder for {session.card_id} at {target.column_id}[{target.index}]")
            self.bus.emit(
                DRAG_UPDATE,
                column_id=target.column_id,
                index=target.index,
                height=session.card_height,
            )
