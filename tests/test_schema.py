"""
Tests for the board schema: defaults, lookups, validation.
"""
import re

import pytest

from kanban_board.schema import Board, Card, Column, BoardFormatError, generate_card_id


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Defaults & ids
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_default_board_has_three_empty_columns():
    board = Board.default()
    assert [c.column_id for c in board.columns] == ["col-1", "col-2", "col-3"]
    assert [c.title for c in board.columns] == ["To Do", "In Progress", "Done"]
    assert board.card_count() == 0


def test_default_board_custom_columns():
    board = Board.default([("x", "Backlog")])
    assert len(board.columns) == 1
    assert board.columns[0].title == "Backlog"


def test_generated_card_id_format():
    assert re.fullmatch(r"card-\d+-[a-z0-9]{7}", generate_card_id())


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Queries
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_locate_and_column_lookup():
    board = Board(columns=[
        Column("A", "A", [Card("c1", "one"), Card("c2", "two")]),
        Column("B", "B", [Card("c3", "three")]),
    ])
    col, idx = board.locate("c3")
    assert col.column_id == "B" and idx == 0
    assert board.locate("nope") is None
    assert board.column("A").index_of("c2") == 1
    assert board.column("Z") is None
    assert board.card_ids() == ["c1", "c2", "c3"]


def test_copy_is_independent():
    board = Board(columns=[Column("A", "A", [Card("c1", "one")])])
    clone = board.copy()
    clone.columns[0].cards[0].text = "changed"
    clone.columns[0].cards.append(Card("c2", "two"))
    assert board.columns[0].cards == [Card("c1", "one")]
    assert clone != board


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Serialization
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_to_dict_shape():
    board = Board(columns=[Column("A", "Todo", [Card("c1", "one")])])
    assert board.to_dict() == {
        "columns": [{"id": "A", "title": "Todo", "cards": [{"id": "c1", "text": "one"}]}]
    }


def test_from_dict_trims_text():
    board = Board.from_dict({"columns": [{"id": "A", "title": "A", "cards": [{"id": "c1", "text": "  hi  "}]}]})
    assert board.columns[0].cards[0].text == "hi"


@pytest.mark.parametrize("payload", [
    None,
    [],
    {},
    {"columns": "nope"},
    {"columns": [{"title": "no id"}]},
    {"columns": [{"id": "A", "title": 3, "cards": []}]},
    {"columns": [{"id": "A", "title": "A", "cards": {}}]},
    {"columns": [{"id": "A", "title": "A", "cards": [{"id": "c1", "text": "   "}]}]},
    {"columns": [{"id": "A", "title": "A", "cards": [{"id": "c1"}]}]},
    {"columns": [{"id": "A", "title": "A"}, {"id": "A", "title": "again"}]},
    {"columns": [
        {"id": "A", "title": "A", "cards": [{"id": "c1", "text": "x"}]},
        {"id": "B", "title": "B", "cards": [{"id": "c1", "text": "y"}]},
    ]},
])
def test_from_dict_rejects_malformed(payload):
    with pytest.raises(BoardFormatError):
        Board.from_dict(payload)


def test_board_format_error_is_value_error():
    assert issubclass(BoardFormatError, ValueError)
