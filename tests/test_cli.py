"""
Tests for the command-line front end.
"""

import unittest

from main import build_parser, format_board_view, format_boards, format_cards, parse_arguments, run_command
from taskboard.api import BoardService
from taskboard.database import DatabaseManager
from taskboard.models import Board, BoardList, BoardView, Card, ListWithCards


class TestArgumentParsing(unittest.TestCase):
    """Test the command line parser."""

    def test_board_commands(self):
        """Test board subcommands and their arguments."""
        args = parse_arguments(["board", "add", "Launch"])
        self.assertEqual((args.command, args.action, args.name), ("board", "add", "Launch"))
        self.assertIsNone(args.db)

        args = parse_arguments(["--db", "other.db", "board", "rm", "b-1"])
        self.assertEqual((args.action, args.board_id, args.db), ("rm", "b-1", "other.db"))

    def test_card_edit_defaults(self):
        """Test commands that learn their parent from the result start without one."""
        args = parse_arguments(["card", "edit", "c-1", "Name", "Desc"])
        self.assertIsNone(args.list_id)

        args = parse_arguments(["list", "rename", "l-1", "Doing"])
        self.assertIsNone(args.board_id)

    def test_command_required(self):
        """Test running without a command is an error."""
        with self.assertRaises(SystemExit):
            build_parser().parse_args([])


class TestFormatting(unittest.TestCase):
    """Test text rendering of results."""

    def test_empty_collections(self):
        """Test empty results render a placeholder."""
        self.assertEqual(format_boards([]), "(no boards)")
        self.assertEqual(format_cards([]), "(no cards)")
        self.assertEqual(format_board_view(BoardView(board_id="b-1")), "(no lists)")

    def test_board_view(self):
        """Test a board view renders one section per list."""
        view = BoardView(board_id="b-1", lists=[
            ListWithCards(
                board_list=BoardList(id="l-1", board_id="b-1", name="Todo"),
                cards=[Card(id="c-1", list_id="l-1", name="Write spec", description="Draft")],
            ),
            ListWithCards(board_list=BoardList(id="l-2", board_id="b-1", name="Done")),
        ])

        text = format_board_view(view)

        self.assertIn("== Todo (l-1)", text)
        self.assertIn("c-1  Write spec\n    Draft", text)
        self.assertIn("== Done (l-2)\n(no cards)", text)
        self.assertEqual(format_boards([Board(id="b-1", name="Launch")]), "b-1  Launch")


class TestRunCommand(unittest.IsolatedAsyncioTestCase):
    """Test commands against a real in-memory store."""

    async def asyncSetUp(self):
        """Open the store."""
        self.db = DatabaseManager(":memory:", read_only=False)
        self.db.connect()
        self.db.initialize_database()
        self.service = BoardService(self.db, transactional_cascade=True, check_parent_on_create=True)

    async def asyncTearDown(self):
        """Close the store."""
        self.db.disconnect()

    async def test_mutations_print_refreshed_collection(self):
        """Test each mutation is followed by the matching listing."""
        output = await run_command(self.service, parse_arguments(["board", "add", "Launch"]))
        self.assertIn("Launch", output)

        board = (await self.service.list_boards())[0]
        output = await run_command(self.service, parse_arguments(["list", "add", board.id, "Todo"]))
        self.assertIn("Todo", output)

        board_list = (await self.service.list_lists(board.id))[0]
        output = await run_command(
            self.service, parse_arguments(["card", "add", board_list.id, "Write spec", "Draft"])
        )
        self.assertIn("Write spec", output)

        card = (await self.service.list_cards(board_list.id))[0]
        output = await run_command(
            self.service, parse_arguments(["card", "edit", card.id, "Review spec", "Second pass"])
        )
        self.assertIn("Review spec", output)
        self.assertNotIn("Write spec", output)

        output = await run_command(self.service, parse_arguments(["view", board.id]))
        self.assertIn("== Todo", output)
        self.assertIn("Review spec", output)

        output = await run_command(self.service, parse_arguments(["board", "rm", board.id]))
        self.assertEqual(output, "(no boards)")


if __name__ == '__main__':
    unittest.main()
