"""
Unit of Work Pattern

Wraps the store calls of one use case in a single database transaction,
so reads and writes made through the stores commit or roll back together.
"""

from abc import ABC, abstractmethod
import logging

from django.db import transaction

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

    Manages a Django database transaction. Leaving the block normally
    commits; an exception, or an explicit rollback(), discards every write.

    Usage:
        with DjangoUnitOfWork() as uow:
            # Read and write through stores
            ...

            # Transaction commits here
    """

    def __init__(self):
        self._transaction = None
        self._rolled_back = False

    def __enter__(self):
        """Start database transaction"""
        self._rolled_back = False
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
                self._transaction = None

    def commit(self):
        """Let the atomic block commit on exit, unless rollback() was requested"""
        if not self._rolled_back:
            logger.debug("Committing unit of work")

    def rollback(self):
        """Mark the atomic block for rollback"""
        logger.warning("Rolling back unit of work")
        self._rolled_back = True
        transaction.set_rollback(True)
