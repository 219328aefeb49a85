"""
Access API for Taskboard.

Each operation is a coroutine that validates its input at the boundary,
runs one unit of work on its own store cursor in a worker thread, and returns
public projections. Failures are logged and re-raised unchanged; nothing is
retried.
"""

import asyncio
import logging
import pydantic
from typing import Any, Callable, List, Optional, Type, TypeVar

from ..config import config
from ..database import DatabaseManager, StoreGateway
from ..cascade import CascadeDeleter
from ..errors import NotFoundError, ValidationError
from ..models import (
    Board, BoardList, Card, BoardInput, ListInput, CardInput,
    CascadeResult, ListWithCards, BoardView, new_id, parse_id,
)

T = TypeVar("T")
InputModel = TypeVar("InputModel", bound=pydantic.BaseModel)


def _validate(model: Type[InputModel], entity: str, **fields: Any) -> InputModel:
    """Build an input payload, converting pydantic failures into ValidationError."""
    try:
        return model(**fields)
    except pydantic.ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ValidationError(entity, problems) from e


class BoardService:
    """
    The twelve board, list and card operations consumed by front ends.
    """

    def __init__(
        self,
        database_manager: DatabaseManager,
        transactional_cascade: Optional[bool] = None,
        check_parent_on_create: Optional[bool] = None
    ):
        """
        Initialize the service.

        Args:
            database_manager: Connected manager owning the shared store connection
            transactional_cascade: Run cascades in one transaction (defaults to config value)
            check_parent_on_create: Verify parents exist before inserting children
                (defaults to config value)
        """
        self.db = database_manager
        self.transactional_cascade = (
            config.cascade_transactional if transactional_cascade is None else transactional_cascade
        )
        self.check_parent_on_create = (
            config.check_parent_on_create if check_parent_on_create is None else check_parent_on_create
        )

    async def _run(self, operation: str, work: Callable[..., T], *args: Any) -> T:
        """Run one unit of work off the event loop, logging any failure."""
        try:
            with self.db.session() as gateway:
                return await asyncio.to_thread(work, gateway, *args)
        except Exception as e:
            logging.error(f"{operation} failed: {e}")
            raise

    def _checked(self, operation: str, build: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Validate input before any store work, logging a rejection."""
        try:
            return build(*args, **kwargs)
        except ValidationError as e:
            logging.error(f"{operation} failed: {e}")
            raise

    # Boards

    async def list_boards(self) -> List[Board]:
        """Return every board in creation order."""
        return await self._run("list-boards", StoreGateway.list_boards)

    async def create_board(self, name: str) -> Board:
        """Create a board and return its projection."""
        payload = self._checked("create-board", _validate, BoardInput, "board", name=name)

        board = await self._run("create-board", StoreGateway.insert_board, new_id(), payload.name)
        logging.info(f"Created new board {board.id}: {board.name}")
        return board

    async def update_board(self, board_id: str, name: str) -> None:
        """Rename a board."""
        native_id = self._checked("update-board", parse_id, board_id, "board")
        payload = self._checked("update-board", _validate, BoardInput, "board", name=name)

        def work(gateway: StoreGateway) -> None:
            if gateway.update_board(native_id, payload.name) is None:
                raise NotFoundError("board", str(native_id))

        await self._run("update-board", work)
        logging.info(f"Updated board {native_id}")

    async def delete_board(self, board_id: str) -> CascadeResult:
        """Delete a board together with its lists and their cards."""
        native_id = self._checked("delete-board", parse_id, board_id, "board")

        def work(gateway: StoreGateway) -> CascadeResult:
            return CascadeDeleter(gateway, self.transactional_cascade).delete_board(native_id)

        return await self._run("delete-board", work)

    # Lists

    async def list_lists(self, board_id: str) -> List[BoardList]:
        """Return the lists of a board in creation order."""
        native_id = self._checked("list-lists", parse_id, board_id, "board")

        return await self._run("list-lists", StoreGateway.find_lists, native_id)

    async def create_list(self, board_id: str, name: str) -> BoardList:
        """Create a list under a board and return its projection."""
        native_board_id = self._checked("create-list", parse_id, board_id, "board")
        payload = self._checked("create-list", _validate, ListInput, "list", name=name)

        def work(gateway: StoreGateway) -> BoardList:
            if self.check_parent_on_create and not gateway.board_exists(native_board_id):
                raise NotFoundError("board", str(native_board_id))
            return gateway.insert_list(new_id(), native_board_id, payload.name)

        board_list = await self._run("create-list", work)
        logging.info(f"Created new list {board_list.id} on board {board_list.board_id}: {board_list.name}")
        return board_list

    async def update_list(self, list_id: str, name: str) -> BoardList:
        """Rename a list and return its new projection."""
        native_id = self._checked("update-list", parse_id, list_id, "list")
        payload = self._checked("update-list", _validate, ListInput, "list", name=name)

        def work(gateway: StoreGateway) -> BoardList:
            updated = gateway.update_list(native_id, payload.name)
            if updated is None:
                raise NotFoundError("list", str(native_id))
            return updated

        board_list = await self._run("update-list", work)
        logging.info(f"Updated list {board_list.id}")
        return board_list

    async def delete_list(self, list_id: str) -> CascadeResult:
        """Delete a list together with its cards."""
        native_id = self._checked("delete-list", parse_id, list_id, "list")

        def work(gateway: StoreGateway) -> CascadeResult:
            return CascadeDeleter(gateway, self.transactional_cascade).delete_list(native_id)

        return await self._run("delete-list", work)

    # Cards

    async def list_cards(self, list_id: str) -> List[Card]:
        """Return the cards of a list in creation order."""
        native_id = self._checked("list-cards", parse_id, list_id, "list")

        return await self._run("list-cards", StoreGateway.find_cards, native_id)

    async def create_card(self, list_id: str, name: str, description: str) -> Card:
        """Create a card under a list and return its projection."""
        native_list_id = self._checked("create-card", parse_id, list_id, "list")
        payload = self._checked("create-card", _validate, CardInput, "card", name=name, description=description)

        def work(gateway: StoreGateway) -> Card:
            if self.check_parent_on_create and not gateway.list_exists(native_list_id):
                raise NotFoundError("list", str(native_list_id))
            return gateway.insert_card(new_id(), native_list_id, payload.name, payload.description)

        card = await self._run("create-card", work)
        logging.info(f"Created new card {card.id} on list {card.list_id}: {card.name}")
        return card

    async def update_card(self, card_id: str, name: str, description: str) -> Card:
        """Change the name and description of a card and return its new projection."""
        native_id = self._checked("update-card", parse_id, card_id, "card")
        payload = self._checked("update-card", _validate, CardInput, "card", name=name, description=description)

        def work(gateway: StoreGateway) -> Card:
            updated = gateway.update_card(native_id, payload.name, payload.description)
            if updated is None:
                raise NotFoundError("card", str(native_id))
            return updated

        card = await self._run("update-card", work)
        logging.info(f"Updated card {card.id}")
        return card

    async def delete_card(self, card_id: str) -> None:
        """Delete a single card."""
        native_id = self._checked("delete-card", parse_id, card_id, "card")

        def work(gateway: StoreGateway) -> None:
            if not gateway.delete_card(native_id):
                raise NotFoundError("card", str(native_id))

        await self._run("delete-card", work)
        logging.info(f"Deleted card {native_id}")

    # Views

    async def load_board_view(self, board_id: str) -> BoardView:
        """
        Load a board with all of its lists and cards.

        The cards of every list are fetched concurrently.

        Raises:
            NotFoundError: If the board does not exist
        """
        native_id = self._checked("load-board-view", parse_id, board_id, "board")

        def work(gateway: StoreGateway) -> List[BoardList]:
            if not gateway.board_exists(native_id):
                raise NotFoundError("board", str(native_id))
            return gateway.find_lists(native_id)

        board_lists = await self._run("load-board-view", work)
        card_sets = await asyncio.gather(
            *(self.list_cards(board_list.id) for board_list in board_lists)
        )
        return BoardView(
            board_id=str(native_id),
            lists=[
                ListWithCards(board_list=board_list, cards=cards)
                for board_list, cards in zip(board_lists, card_sets)
            ],
        )
