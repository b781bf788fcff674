import json
import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from cloudpaste.models import PasteModel
from cloudpaste.dao.exceptions import DataStoreError, CorruptRecordError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_redis_connection_error[F](method: F) -> F:
    """Wrap Redis-interacting DAO methods to handle connection errors

    Both refused connections and socket timeouts are reported as DataStoreError;
    retrying is left to the caller.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise
            redis.exceptions.ConnectionError or redis.exceptions.TimeoutError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on connectivity issues with Redis.

    Example:
        >>> @handle_redis_connection_error
        ... def get(self, paste_id):
        ...     return self.redis.get(self.keys.paste_key(paste_id))
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_location(self.redis)}.") from e

    return wrapper


def redis_location(client: redis.Redis) -> str:
    """Describe where a client connects to, as host:port/db"""
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def encode_paste(paste: PasteModel) -> str:
    """Serialize a paste into the stored JSON record

    The record shape (including its camelCase/snake_case mix) is shared with the
    legacy paste service, so records it wrote stay readable:

        {"content": ..., "createdAt": ..., "ttl_seconds": ... | null, "max_views": ... | null, "views": ...}

    The paste id is the key, so it is not part of the value.
    """
    # fmt: off
    return json.dumps({
        'content': paste.content,
        'createdAt': paste.created_at,
        'ttl_seconds': paste.ttl_seconds,
        'max_views': paste.max_views,
        'views': paste.views,
    })
    # fmt: on


def decode_paste(paste_id: str, blob: str | bytes) -> PasteModel:
    """Deserialize a stored JSON record into a PasteModel

    Raises:
        CorruptRecordError:
            If the blob isn't JSON or lacks required fields.
    """
    try:
        record = json.loads(blob)
        return PasteModel(
            paste_id=paste_id,
            content=record['content'],
            created_at=int(record['createdAt']),
            ttl_seconds=record.get('ttl_seconds'),
            max_views=record.get('max_views'),
            views=int(record.get('views', 0)),
        )
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise CorruptRecordError(f"Paste record '{paste_id}' is malformed.") from e
