"""Shared test fixtures for the kanban board tests."""

import itertools

import pytest

from kanban_board.board import BoardState
from kanban_board.events import EventBus
from kanban_board.geometry import StaticLayout
from kanban_board.schema import Board, Card, Column
from kanban_board.store import MemoryStore


def make_board(**columns):
    """make_board(A=["c1", "c2"], B=[]) -> columns A, B with cards whose text is 'text <id>'."""
    return Board(columns=[
        Column(column_id=cid, title=cid, cards=[Card(card_id=c, text=f"text {c}") for c in cards])
        for cid, cards in columns.items()
    ])


def ids(state, column_id):
    return [c.card_id for c in state.column(column_id).cards]


class Recorder:
    """Collects bus signals as (event_type, kwargs) tuples."""

    def __init__(self, bus, *event_types):
        self.calls = []
        for event_type in event_types:
            bus.subscribe(event_type, self._make(event_type))

    def _make(self, event_type):
        def _record(**kwargs):
            self.calls.append((event_type, kwargs))
        return _record

    def of(self, event_type):
        return [kw for et, kw in self.calls if et == event_type]


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"card-{next(counter)}"


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def state(store, bus, id_factory):
    """BoardState over A=[c1, c2], B=[] already saved to the store."""
    st = BoardState(store, bus=bus, id_factory=id_factory)
    st.save(make_board(A=["c1", "c2"], B=[]))
    store.writes = 0
    return st


def grid(state, **kwargs):
    return StaticLayout.from_board(state.board, **kwargs)
