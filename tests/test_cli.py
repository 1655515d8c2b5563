"""Tests for the kanban-board command line."""
import pytest

from kanban_board.board import BoardState
from kanban_board.cli import main
from kanban_board.store import KanbanStore


@pytest.fixture
def db(tmp_path, monkeypatch):
    monkeypatch.delenv("KANBAN_BOARD_DB", raising=False)
    return str(tmp_path / "board.db")


def run(db, *argv):
    return main(["--config", "/nonexistent.yaml", "--db", db, *argv])


def _board(db):
    return BoardState(KanbanStore(db)).board


def test_show_default_board(db, capsys):
    assert run(db, "show") == 0
    out = capsys.readouterr().out
    assert "To Do [col-1] (0)" in out
    assert "(empty)" in out


def test_add_move_edit_delete(db, capsys):
    assert run(db, "add", "col-1", "  write docs ") == 0
    card = _board(db).columns[0].cards[0]
    assert card.text == "write docs"

    assert run(db, "move", card.card_id, "col-3", "0") == 0
    assert _board(db).column("col-3").cards[0].card_id == card.card_id

    assert run(db, "edit", card.card_id, "ship docs") == 0
    assert _board(db).column("col-3").cards[0].text == "ship docs"

    assert run(db, "show") == 0
    assert f"0. ship docs  <{card.card_id}>" in capsys.readouterr().out

    assert run(db, "delete", card.card_id) == 0
    assert _board(db).card_count() == 0


def test_noops_exit_nonzero(db, capsys):
    assert run(db, "add", "col-1", "   ") == 1
    assert run(db, "add", "nowhere", "text") == 1
    assert run(db, "delete", "ghost") == 1
    assert run(db, "edit", "ghost", "text") == 1
    assert run(db, "move", "ghost", "col-1", "0") == 1
    assert "not found" in capsys.readouterr().out
    assert _board(db).card_count() == 0
