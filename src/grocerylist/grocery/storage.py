"""Key-value persistence for the grocery list blob."""

from abc import ABC, abstractmethod

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from grocerylist.logging_config import get_logger
from grocerylist.models import KeyValueEntry

logger = get_logger(__name__)


class StorageError(Exception):
    """Base exception for storage errors."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class StorageReadError(StorageError):
    """Raised when a stored value cannot be read."""


class StorageWriteError(StorageError):
    """Raised when a value cannot be written or removed."""


class KeyValueStore(ABC):
    """Abstract string key-value store."""

    @abstractmethod
    async def get_item(self, key: str) -> str | None:
        """
        Read the value stored under a key.

        Returns:
            The stored string, or None if nothing is stored.

        Raises:
            StorageReadError: If the backend cannot be read.
        """
        pass

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """
        Store a value, replacing any previous one.

        Raises:
            StorageWriteError: If the value was not persisted.
        """
        pass

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """
        Remove a key. Removing a missing key is not an error.

        Raises:
            StorageWriteError: If the removal was not persisted.
        """
        pass


class SQLKeyValueStore(KeyValueStore):
    """Key-value store backed by the kv_store table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_item(self, key: str) -> str | None:
        try:
            entry = await self.session.get(KeyValueEntry, key, populate_existing=True)
        except SQLAlchemyError as e:
            logger.error(f"Failed to read key {key}: {e}")
            raise StorageReadError(f"Failed to read {key}", key=key) from e
        return entry.value if entry else None

    async def set_item(self, key: str, value: str) -> None:
        try:
            await self.session.merge(KeyValueEntry(key=key, value=value))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to write key {key}: {e}")
            raise StorageWriteError(f"Failed to write {key}", key=key) from e

    async def remove_item(self, key: str) -> None:
        try:
            await self.session.execute(delete(KeyValueEntry).where(KeyValueEntry.key == key))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to remove key {key}: {e}")
            raise StorageWriteError(f"Failed to remove {key}", key=key) from e
