"""
Unit of Work Pattern

Wraps one logical operation in a database transaction so that every
mutation it performs (requests, blocked intervals, chat messages,
rating aggregates) is applied together or not at all.
"""

from abc import ABC, abstractmethod
import logging

from django.db import DatabaseError, transaction

from shared.domain.errors import InternalError

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        """Commit the transaction"""
        pass

    @abstractmethod
    def rollback(self):
        """Rollback the transaction"""
        pass


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Manages a Django database transaction. Row locks taken with
    select_for_update() inside the block are held until it exits, which
    is what serializes concurrent bookings of the same offer.

    Storage failures are re-raised as InternalError after the rollback.

    Usage:
        with DjangoUnitOfWork():
            # Lock the offer row
            offer = offer_repo.get(offer_id, lock=True)

            # Read intervals, decide, write
            ...

            # Transaction commits here
    """

    def __init__(self):
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic()
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)

        if exc_type is not None and issubclass(exc_type, DatabaseError):
            logger.error(f"Storage failure inside unit of work: {exc_val}", exc_info=True)
            raise InternalError("Storage is unavailable") from exc_val
        return False

    def commit(self):
        logger.debug("Committing transaction")

    def rollback(self):
        logger.warning("Rolling back transaction")
