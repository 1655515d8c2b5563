"""
kanban-board command line.

  kanban-board show
  kanban-board add COLUMN_ID TEXT
  kanban-board edit CARD_ID TEXT
  kanban-board delete CARD_ID
  kanban-board move CARD_ID COLUMN_ID INDEX

Exit status 0 when the command applied, 1 when it was a no-op.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .board import BoardState
from .config import Config
from .store import KanbanStore


def _print_board(state: BoardState) -> None:
    for col in state.board.columns:
        print(f"{col.title} [{col.column_id}] ({len(col.cards)})")
        if not col.cards:
            print("    (empty)")
        for i, card in enumerate(col.cards):
            print(f"  {i}. {card.text}  <{card.card_id}>")


def _run(args: argparse.Namespace, state: BoardState) -> int:
    if args.command == "show":
        _print_board(state)
        return 0

    if args.command == "add":
        card = state.add_card(args.column_id, args.text)
        if card is None:
            print(f"Nothing added: unknown column {args.column_id!r} or empty text.")
            return 1
        print(f"Added {card.card_id}")
        return 0

    if args.command == "edit":
        if not state.edit_card(args.card_id, args.text):
            print(f"Card {args.card_id!r} unchanged.")
            return 1
        print(f"Edited {args.card_id}")
        return 0

    if args.command == "delete":
        if state.delete_card(args.card_id) is None:
            print(f"Card {args.card_id!r} not found.")
            return 1
        print(f"Deleted {args.card_id}")
        return 0

    if args.command == "move":
        if not state.move_card(args.card_id, args.column_id, args.index):
            print(f"Card {args.card_id!r} not moved.")
            return 1
        print(f"Moved {args.card_id} to {args.column_id}")
        return 0

    return 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="kanban-board",
        description="Local kanban board: columns of ordered text cards",
    )
    ap.add_argument("--config", default=None, help="Path to kanban_board.yaml")
    ap.add_argument("--db", default=None, help="SQLite file holding the board slot")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("show", help="Print the board")

    add = sub.add_parser("add", help="Append a card to a column")
    add.add_argument("column_id")
    add.add_argument("text")

    edit = sub.add_parser("edit", help="Replace a card's text")
    edit.add_argument("card_id")
    edit.add_argument("text")

    delete = sub.add_parser("delete", help="Remove a card")
    delete.add_argument("card_id")

    move = sub.add_parser("move", help="Move a card to a column position")
    move.add_argument("card_id")
    move.add_argument("column_id")
    move.add_argument("index", type=int)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cfg = Config.load(args.config)
    if args.db:
        cfg.db_path = str(Path(args.db).expanduser())

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, str(cfg.log_level).upper(), logging.INFO),
        format="%(asctime)s [kanban-board] %(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    store = KanbanStore(cfg.db_path, slot=cfg.slot, default_factory=cfg.default_board)
    state = BoardState(store)
    return _run(args, state)


if __name__ == "__main__":
    sys.exit(main())
