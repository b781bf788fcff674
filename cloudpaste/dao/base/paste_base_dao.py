"""Abstract base class for paste data access objects (DAOs).

This class establishes a consistent contract for all paste record stores,
regardless of the underlying storage mechanism (e.g., Redis, in-process memory).

Responsibilities:
    - Provide an interface for storing, retrieving and deleting PasteModel records.
    - Provide a conditional write so callers can make read-modify-write atomic.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from cloudpaste.models import PasteModel
        >>> from cloudpaste.dao.redis import PasteRedisDAO

        >>> dao = PasteRedisDAO(...)

        >>> paste = PasteModel(paste_id='Xq3bT9aZ', content='hello', created_at=1000)
        >>> dao.set(paste)

        >>> retrieved = dao.get('Xq3bT9aZ')
        >>> retrieved.content
        'hello'

        >>> viewed = dataclasses.replace(retrieved, views=1)
        >>> dao.compare_and_set(viewed, expected=retrieved)
        True
        >>> dao.compare_and_set(viewed, expected=retrieved)  # stale expectation
        False
"""

from abc import ABC, abstractmethod

from cloudpaste.models import PasteModel


class PasteBaseDAO(ABC):
    """Interface for paste data access objects (DAOs).

    Methods:
        get(paste_id: str, **kwargs) -> PasteModel | None:
            Retrieve a paste by id. Returns None if not found.
            Raises DataStoreError on connection or read failure.

        set(paste: PasteModel, **kwargs) -> PasteBaseDAO:
            Unconditionally store a paste (last writer wins).
            Raises DataStoreError on connection or write failure.

        compare_and_set(paste: PasteModel, expected: PasteModel, **kwargs) -> bool:
            Store a paste only if the stored record still equals `expected`.
            Raises DataStoreError on connection or write failure.

        delete(paste_id: str, **kwargs) -> bool:
            Remove a paste. Deleting a missing paste is not an error.
            Raises DataStoreError on connection or write failure.

        ping(**kwargs) -> bool:
            Liveness check. Never raises on connectivity issues.

    Subclassing:
        Datastore-specific implementations (e.g., PasteRedisDAO or
        PasteMemoryDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - The DAO never interprets ttl_seconds or max_views. Expiry and view
          limits are enforced by the caller (see PasteLifecycleManager).
    """

    @abstractmethod
    def get(self, paste_id: str, **kwargs) -> PasteModel | None:
        """Retrieve a paste from the data store by its id.

        Args:
            paste_id (str):
                The id of the paste to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            PasteModel | None: The stored paste if found, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def set(self, paste: PasteModel, **kwargs) -> 'PasteBaseDAO':
        """Store a paste, replacing any record with the same id.

        Args:
            paste (PasteModel):
                The paste to be stored.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            PasteBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def compare_and_set(self, paste: PasteModel, expected: PasteModel, **kwargs) -> bool:
        """Store a paste only if the currently stored record equals `expected`.

        Args:
            paste (PasteModel):
                The new paste state to be stored.

            expected (PasteModel):
                The paste state the caller last read.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if the write happened, False if the record changed or vanished.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def delete(self, paste_id: str, **kwargs) -> bool:
        """Remove a paste from the data store.

        Args:
            paste_id (str):
                The id of the paste to be removed.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if a record was removed, False if none existed.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def ping(self, **kwargs) -> bool:
        """Check that the data store is reachable.

        Returns:
            bool: True if the data store responds, False otherwise.
        """
        pass
