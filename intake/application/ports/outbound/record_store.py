from abc import ABC, abstractmethod


class RecordStore(ABC):
    """Append-only access to the hosted relational backend."""

    @abstractmethod
    async def insert(self, table: str, rows: list[dict]) -> list[dict]:
        """Insert rows and return the stored representation.

        Raises:
            PersistenceError: If the backend rejects the write
        """
        pass
