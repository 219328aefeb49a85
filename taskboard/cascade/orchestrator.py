"""
Cascade-delete orchestrator for Taskboard.

The store does not enforce parent references, so deleting a board or a list
has to remove its descendants first. Children always go before their parent:
a reader never sees a list pointing at a deleted board, or a card pointing at
a deleted list.
"""

import logging
import uuid
from contextlib import nullcontext
from typing import Optional

from ..config import config
from ..database import StoreGateway
from ..errors import NotFoundError
from ..models import CascadeResult
from ..models.identifiers import to_str


class CascadeDeleter:
    """
    Deletes boards and lists together with all of their descendants.

    With ``transactional`` enabled every cascade runs inside one store
    transaction, so a missing root rolls back and leaves the store untouched.
    Without it the steps are committed one by one; a cascade interrupted
    halfway leaves the ancestor in place with fewer descendants, and rerunning
    the same delete finishes the job because the bulk steps are no-ops once
    empty.
    """

    def __init__(self, gateway: StoreGateway, transactional: Optional[bool] = None):
        """
        Initialize the orchestrator.

        Args:
            gateway: Store gateway for the current unit of work
            transactional: Wrap each cascade in a transaction (defaults to config value)
        """
        self.gateway = gateway
        self.transactional = config.cascade_transactional if transactional is None else transactional

    def _unit(self):
        if self.transactional:
            return self.gateway.transaction()
        return nullcontext(self.gateway)

    def delete_board(self, board_id: uuid.UUID) -> CascadeResult:
        """
        Delete a board, its lists, and the cards of those lists.

        Args:
            board_id: Native identifier of the board

        Returns:
            Counts of the descendants removed

        Raises:
            NotFoundError: If the board itself did not exist
        """
        cards_deleted = lists_deleted = 0
        try:
            with self._unit():
                list_ids = self.gateway.find_list_ids(board_id)
                if list_ids:
                    cards_deleted = self.gateway.delete_cards_by_lists(list_ids)
                lists_deleted = self.gateway.delete_lists_by_board(board_id)

                # Root is checked last; the steps above are harmless for a missing board
                if not self.gateway.delete_board(board_id):
                    raise NotFoundError("board", to_str(board_id))
        except Exception:
            # Only step-by-step cascades keep what they removed before failing
            if not self.transactional and (cards_deleted or lists_deleted):
                logging.warning(
                    f"Delete of board {board_id} stopped after removing "
                    f"{cards_deleted} cards and {lists_deleted} lists"
                )
            raise

        if cards_deleted:
            logging.info(f"Deleted {cards_deleted} cards associated with the lists of board {board_id}")
        else:
            logging.info(f"No cards found for the lists of board {board_id}")
        if lists_deleted:
            logging.info(f"Deleted {lists_deleted} lists for board {board_id}")
        else:
            logging.info(f"No lists found for board {board_id}, or they were already deleted")
        logging.info(f"Deleted board {board_id}")
        return CascadeResult(
            entity="board",
            entity_id=to_str(board_id),
            lists_deleted=lists_deleted,
            cards_deleted=cards_deleted,
        )

    def delete_list(self, list_id: uuid.UUID) -> CascadeResult:
        """
        Delete a list and its cards.

        Args:
            list_id: Native identifier of the list

        Returns:
            Count of the cards removed

        Raises:
            NotFoundError: If the list itself did not exist
        """
        cards_deleted = 0
        try:
            with self._unit():
                cards_deleted = self.gateway.delete_cards_by_list(list_id)
                if not self.gateway.delete_list(list_id):
                    raise NotFoundError("list", to_str(list_id))
        except Exception:
            if not self.transactional and cards_deleted:
                logging.warning(f"Delete of list {list_id} stopped after removing {cards_deleted} cards")
            raise

        if cards_deleted:
            logging.info(f"Deleted {cards_deleted} cards associated with list {list_id}")
        else:
            logging.info(f"No cards found for list {list_id}")
        logging.info(f"Deleted list {list_id}")
        return CascadeResult(
            entity="list",
            entity_id=to_str(list_id),
            cards_deleted=cards_deleted,
        )
