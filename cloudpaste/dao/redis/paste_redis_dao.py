"""Data Access Object (DAO) implementation for managing pastes in Redis

This module provides a Redis-based implementation of PasteBaseDAO for CRUD-like
operations with PasteModel instances.

Responsibilities:
    - Store, retrieve and delete paste records in Redis;
    - Provide an optimistic conditional write (WATCH/MULTI/EXEC) for view counting;
    - Raise appropriate DAO exceptions on connectivity issues.

Classes:
    PasteRedisDAO:
        DAO for storing and retrieving PasteModel in a Redis datastore.

Example:
    >>> from cloudpaste.models import PasteModel
    >>> from cloudpaste.dao.redis import PasteRedisDAO

    >>> dao = PasteRedisDAO(prefix="cloudpaste:dev")

    >>> paste = PasteModel(paste_id='Xq3bT9aZ', content='hello', created_at=1000, max_views=2)
    >>> dao.set(paste)
    <PasteRedisDAO>

    >>> retrieved = dao.get('Xq3bT9aZ')
    >>> retrieved.views
    0
    >>> dao.compare_and_set(dataclasses.replace(retrieved, views=1), expected=retrieved)
    True
    >>> dao.delete('Xq3bT9aZ')
    True
"""

import logging

import redis
from beartype import beartype

from cloudpaste.models import PasteModel
from cloudpaste.dao.base import PasteBaseDAO
from cloudpaste.dao.redis.mixins import RedisClientMixin
from cloudpaste.dao.redis.helpers import handle_redis_connection_error, encode_paste, decode_paste


logger = logging.getLogger(__name__)


class PasteRedisDAO(RedisClientMixin, PasteBaseDAO):
    """Redis-based Data Access Object (DAO) for managing paste records

    This class implements the PasteBaseDAO interface using Redis as a data store.
    Each paste is a single JSON string under `[<prefix>:]paste:<paste_id>`. No Redis
    expiry is attached to the keys: TTLs are enforced lazily by the caller.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        get(paste_id: str, **kwargs) -> PasteModel | None:
            Retrieve a paste by id, or None when the key doesn't exist.

        set(paste: PasteModel, **kwargs) -> PasteRedisDAO:
            Unconditionally write a paste record.

        compare_and_set(paste: PasteModel, expected: PasteModel, **kwargs) -> bool:
            Write a paste record only if the stored record still equals `expected`.

        delete(paste_id: str, **kwargs) -> bool:
            Remove a paste record (idempotent).

        ping(**kwargs) -> bool:
            PING Redis without raising.

        All methods except ping() raise DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def get(self, paste_id: str, **kwargs) -> PasteModel | None:
        """Retrieve a stored paste by id

        Args:
            paste_id (str):
                The paste identifier.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            PasteModel | None:
                The stored paste, or None if the key doesn't exist.

        Raises:
            CorruptRecordError:
                If the stored value isn't a valid paste record.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get('Xq3bT9aZ')
            PasteModel(paste_id='Xq3bT9aZ', content='hello', created_at=1000, ...)
        """
        blob = self.redis.get(self.keys.paste_key(paste_id))
        if blob is None:
            return None
        return decode_paste(paste_id, blob)

    @handle_redis_connection_error
    @beartype
    def set(self, paste: PasteModel, **kwargs) -> 'PasteRedisDAO':
        """Write a paste record into Redis (last writer wins)

        Args:
            paste (PasteModel):
                The paste to be stored.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            PasteRedisDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If Redis connectivity issues occur.
        """
        self.redis.set(self.keys.paste_key(paste.paste_id), encode_paste(paste))
        return self

    @handle_redis_connection_error
    @beartype
    def compare_and_set(self, paste: PasteModel, expected: PasteModel, **kwargs) -> bool:
        """Write a paste record only if nobody changed it since `expected` was read

        Uses Redis optimistic locking: the key is WATCHed, its current value is compared
        to `expected`, and the new value is written inside MULTI/EXEC. If another client
        touches the key between WATCH and EXEC, Redis aborts the transaction.

        Args:
            paste (PasteModel):
                The new paste state.
            expected (PasteModel):
                The paste state the caller based its update on.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            bool:
                True if the write was committed, False if the record changed or vanished.

        Raises:
            ValueError:
                If `paste` and `expected` have different ids.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        if paste.paste_id != expected.paste_id:
            raise ValueError(f"Can't compare paste '{paste.paste_id}' against paste '{expected.paste_id}'.")

        paste_key = self.keys.paste_key(paste.paste_id)

        # NOTE: Without WATCH, two concurrent readers of a paste with max_views=1 could both
        #       read views=0 and both write views=1, serving the last view twice:
        #
        #       (client 1): GET <app>:paste:<id>       => views=0
        #       (client 2): GET <app>:paste:<id>       => views=0
        #       (client 1): SET <app>:paste:<id> ...   => views=1 (served)
        #       (client 2): SET <app>:paste:<id> ...   => views=1 (served again)
        #
        #       With WATCH, client 2's EXEC fails with WatchError and it has to re-read.
        with self.redis.pipeline(transaction=True) as pipe:
            try:
                pipe.watch(paste_key)
                blob = pipe.get(paste_key)
                if blob is None or decode_paste(expected.paste_id, blob) != expected:
                    pipe.unwatch()
                    return False

                pipe.multi()
                pipe.set(paste_key, encode_paste(paste))
                pipe.execute()
            except redis.exceptions.WatchError:
                logger.debug('Concurrent write detected on paste %s.', paste.paste_id)
                return False

        return True

    @handle_redis_connection_error
    @beartype
    def delete(self, paste_id: str, **kwargs) -> bool:
        """Remove a paste record from Redis

        Returns:
            bool: True if the key existed, False otherwise.

        Raises:
            DataStoreError:
                If Redis connectivity issues occur.
        """
        return bool(self.redis.delete(self.keys.paste_key(paste_id)))

    def ping(self, **kwargs) -> bool:
        """PING Redis, returning False instead of raising when it's unreachable"""
        return self._healthcheck(raise_error=False)
