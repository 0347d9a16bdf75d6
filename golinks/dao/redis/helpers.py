import functools
import logging
from datetime import datetime
from typing import TypeVar, Any
from collections.abc import Callable

import redis

from golinks.constants import LinkField
from golinks.dao.exceptions import DataStoreError
from golinks.models import Link


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])

logger = logging.getLogger(__name__)


def handle_redis_errors(method: F) -> F:
    """Wrap Redis-interacting DAO methods to translate Redis errors

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on connectivity issues,
            timeouts and failed transactions.

    Example:
        >>> @handle_redis_errors
        ... def get_count(self):
        ...     return self.redis.get('count')
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            info = self.redis.connection_pool.connection_kwargs
            redis_host = info.get('host')
            redis_port = info.get('port')
            redis_db = info.get('db')
            logger.error('Redis unreachable.', extra={'operation': method.__name__, 'error': str(e)})
            raise DataStoreError(f"Can't connect to Redis at {redis_host}:{redis_port}/{redis_db}.") from e
        except redis.exceptions.RedisError as e:
            logger.error('Redis operation failed.', extra={'operation': method.__name__, 'error': str(e)})
            raise DataStoreError(f'Redis operation {method.__name__!r} failed: {e}') from e

    return wrapper


def link_to_hash(link: Link) -> dict[str, str]:
    """Serialize a Link into a Redis hash mapping (timestamps as ISO-8601)"""
    mapping = {
        LinkField.SHORT: link.short,
        LinkField.LONG: link.long,
        LinkField.OWNER: link.owner,
    }
    if link.created is not None:
        mapping[LinkField.CREATED] = link.created.isoformat()
    if link.last_edit is not None:
        mapping[LinkField.LAST_EDIT] = link.last_edit.isoformat()
    return mapping


def link_from_hash(data: dict[str, str]) -> Link:
    """Deserialize a Redis hash mapping (as returned by HGETALL) into a Link"""
    created = data.get(LinkField.CREATED)
    last_edit = data.get(LinkField.LAST_EDIT)
    return Link(
        short=data[LinkField.SHORT],
        long=data.get(LinkField.LONG, ''),
        owner=data.get(LinkField.OWNER, ''),
        created=datetime.fromisoformat(created) if created else None,
        last_edit=datetime.fromisoformat(last_edit) if last_edit else None,
    )
