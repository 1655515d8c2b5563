"""
Signal bus: carries plain data from the board core to whatever renders it.

Signals:
  board_changed(board)                  - snapshot after every applied mutation
  drag_start(card_id, column_id, index) - hide the original card
  drag_update(column_id, index, height) - move/remove the placeholder (None, None = remove)
  drag_end(card_id, moved)              - restore display, drop transient indicators
"""
import logging
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

BOARD_CHANGED = "board_changed"
DRAG_START = "drag_start"
DRAG_UPDATE = "drag_update"
DRAG_END = "drag_end"


class EventBus:
    """Routes core signals to presentation callbacks."""

    def __init__(self):
        self.subscribers: Dict[str, List[Callable]] = {}  # event_type -> callbacks

    def subscribe(self, event_type: str, callback: Callable) -> None:
        """Register a callback for an event type."""
        if event_type not in self.subscribers:
            self.subscribers[event_type] = []
        self.subscribers[event_type].append(callback)

    def unsubscribe(self, event_type: str, callback: Callable) -> None:
        callbacks = self.subscribers.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event_type: str, **kwargs) -> None:
        """Emit an event to all subscribers. A failing callback does not stop the rest."""
        for callback in list(self.subscribers.get(event_type, [])):
            try:
                callback(**kwargs)
            except Exception:
                logger.exception(f"Error in {event_type} callback")
