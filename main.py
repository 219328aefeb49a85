#!/usr/bin/env python3
"""
Taskboard - Kanban Board Data Layer

Command-line front end for the Taskboard access API. Every mutating command
re-fetches and prints the affected collection afterwards, the same refresh
contract a graphical front end follows.
"""

import asyncio
import logging
import sys
import argparse
from typing import List, Optional

from taskboard import __version__
from taskboard.api import BoardService
from taskboard.database import DatabaseManager
from taskboard.errors import TaskboardError
from taskboard.models import Board, BoardList, Card, BoardView
from taskboard.config import get_config

config = get_config()


def setup_logging():
    """Configure logging for the application."""
    level = getattr(logging, config.log_level.upper())
    format_str = config.log_format
    log_file = config.log_filename

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file)
        ]
    )


def format_boards(boards: List[Board]) -> str:
    """Render boards one per line."""
    if not boards:
        return "(no boards)"
    return "\n".join(f"{board.id}  {board.name}" for board in boards)


def format_lists(board_lists: List[BoardList]) -> str:
    """Render lists one per line."""
    if not board_lists:
        return "(no lists)"
    return "\n".join(f"{board_list.id}  {board_list.name}" for board_list in board_lists)


def format_cards(cards: List[Card]) -> str:
    """Render cards with their descriptions indented below."""
    if not cards:
        return "(no cards)"
    return "\n".join(f"{card.id}  {card.name}\n    {card.description}" for card in cards)


def format_board_view(view: BoardView) -> str:
    """
    Render a whole board, list by list.

    Args:
        view: Snapshot returned by BoardService.load_board_view

    Returns:
        Multi-line text with one section per list
    """
    if not view.lists:
        return "(no lists)"

    sections = []
    for entry in view.lists:
        header = f"== {entry.board_list.name} ({entry.board_list.id})"
        sections.append(header + "\n" + format_cards(entry.cards))
    return "\n\n".join(sections)


async def run_command(service: BoardService, args: argparse.Namespace) -> str:
    """
    Execute one parsed command against the access API.

    Args:
        service: The access API
        args: Parsed command line

    Returns:
        Text to print
    """
    if args.command == "view":
        return format_board_view(await service.load_board_view(args.board_id))

    if args.command == "board":
        if args.action == "add":
            await service.create_board(args.name)
        elif args.action == "rename":
            await service.update_board(args.board_id, args.name)
        elif args.action == "rm":
            result = await service.delete_board(args.board_id)
            logging.info(f"Removed {result.lists_deleted} lists and {result.cards_deleted} cards")
        return format_boards(await service.list_boards())

    if args.command == "list":
        board_id = args.board_id
        if args.action == "add":
            await service.create_list(board_id, args.name)
        elif args.action == "rename":
            board_id = (await service.update_list(args.list_id, args.name)).board_id
        elif args.action == "rm":
            result = await service.delete_list(args.list_id)
            logging.info(f"Removed {result.cards_deleted} cards")
        return format_lists(await service.list_lists(board_id))

    if args.command == "card":
        list_id = args.list_id
        if args.action == "add":
            await service.create_card(list_id, args.name, args.description)
        elif args.action == "edit":
            list_id = (await service.update_card(args.card_id, args.name, args.description)).list_id
        elif args.action == "rm":
            await service.delete_card(args.card_id)
        return format_cards(await service.list_cards(list_id))

    raise ValueError(f"Unknown command: {args.command}")


async def run(args: argparse.Namespace) -> str:
    """Open the store, run one command, and close the store again."""
    with DatabaseManager(args.db) as db:
        db.initialize_database()
        service = BoardService(db)
        return await run_command(service, args)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Taskboard - Kanban Board Data Layer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py board add "Launch"                   # Create a board
  python main.py list add BOARD_ID "Todo"             # Add a list to a board
  python main.py card add LIST_ID "Write spec" "Draft the first version"
  python main.py view BOARD_ID                        # Show every list and card of a board
  python main.py board rm BOARD_ID                    # Delete a board with its lists and cards
        """
    )

    parser.add_argument(
        "--db",
        type=str,
        default=None,
        help=f"Path to the database file (default: {config.database_filename})"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Taskboard {__version__}"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    view = commands.add_parser("view", help="Show a board with all lists and cards")
    view.add_argument("board_id")

    board = commands.add_parser("board", help="Manage boards")
    board_actions = board.add_subparsers(dest="action", required=True)
    board_actions.add_parser("ls", help="List boards")
    board_add = board_actions.add_parser("add", help="Create a board")
    board_add.add_argument("name")
    board_rename = board_actions.add_parser("rename", help="Rename a board")
    board_rename.add_argument("board_id")
    board_rename.add_argument("name")
    board_rm = board_actions.add_parser("rm", help="Delete a board with its lists and cards")
    board_rm.add_argument("board_id")

    board_list = commands.add_parser("list", help="Manage the lists of a board")
    list_actions = board_list.add_subparsers(dest="action", required=True)
    list_ls = list_actions.add_parser("ls", help="List the lists of a board")
    list_ls.add_argument("board_id")
    list_add = list_actions.add_parser("add", help="Create a list")
    list_add.add_argument("board_id")
    list_add.add_argument("name")
    list_rename = list_actions.add_parser("rename", help="Rename a list")
    list_rename.add_argument("list_id")
    list_rename.add_argument("name")
    list_rename.set_defaults(board_id=None)
    list_rm = list_actions.add_parser("rm", help="Delete a list with its cards")
    list_rm.add_argument("board_id")
    list_rm.add_argument("list_id")

    card = commands.add_parser("card", help="Manage the cards of a list")
    card_actions = card.add_subparsers(dest="action", required=True)
    card_ls = card_actions.add_parser("ls", help="List the cards of a list")
    card_ls.add_argument("list_id")
    card_add = card_actions.add_parser("add", help="Create a card")
    card_add.add_argument("list_id")
    card_add.add_argument("name")
    card_add.add_argument("description")
    card_edit = card_actions.add_parser("edit", help="Change the name and description of a card")
    card_edit.add_argument("card_id")
    card_edit.add_argument("name")
    card_edit.add_argument("description")
    card_edit.set_defaults(list_id=None)
    card_rm = card_actions.add_parser("rm", help="Delete a card")
    card_rm.add_argument("list_id")
    card_rm.add_argument("card_id")

    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def main():
    """Main entry point."""
    args = parse_arguments()
    setup_logging()

    try:
        print(asyncio.run(run(args)))

    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        print("\nInterrupted.")

    except TaskboardError as e:
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
