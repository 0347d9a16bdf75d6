"""Data Access Object (DAO) implementation for managing go links in Redis

This module provides a Redis-based implementation of LinkBaseDAO.

Responsibilities:
    - Store one Link per canonical short name;
    - Maintain the index of registered canonical short names;
    - Resolve canonical short names to their registered display form;
    - Provide error handling and raise appropriate DAO exceptions.

Layout:
    <prefix>:links:<canonical>  - hash {short, long, owner[, created][, last_edit]}
    <prefix>:links              - set of canonical short names with a Link

Example:
    >>> from golinks.models import Link
    >>> from golinks.dao.redis import LinkRedisDAO

    >>> dao = LinkRedisDAO(prefix='golinks:dev')
    >>> dao.save(Link(short='Foo.Bar', long='https://example.com', owner='foo@bar.com'))
    <LinkRedisDAO>
    >>> dao.get('foo-bar').short
    'Foo.Bar'
    >>> [link.short for link in dao.by_owner('foo@bar.com')]
    ['Foo.Bar']
"""

import logging
from collections.abc import Iterable

from beartype import beartype

from golinks.constants import LinkField
from golinks.models import Link
from golinks.dao.base import LinkBaseDAO
from golinks.dao.redis.mixins import RedisClientMixin
from golinks.dao.redis.helpers import handle_redis_errors, link_to_hash, link_from_hash
from golinks.dao.exceptions import LinkNotFoundError
from golinks.utils.canonical import canonicalize


logger = logging.getLogger(__name__)


class LinkRedisDAO(RedisClientMixin, LinkBaseDAO):
    """Redis-based Data Access Object (DAO) for managing go links

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.
    """

    @handle_redis_errors
    @beartype
    def save(self, link: Link, **kwargs) -> 'LinkRedisDAO':
        """Insert or replace the Link registered under canonicalize(link.short)

        The record is rewritten as a whole (last writer wins, display form
        included) and indexed in a single MULTI/EXEC transaction, so readers
        see either the previous record or the new one.

        Args:
            link (Link):
                Link to store.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            LinkRedisDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If a Redis issue occurs during the transaction.
        """
        canonical = canonicalize(link.short)
        link_key = self.keys.link_key(canonical)

        # NOTE: DEL before HSET drops optional fields (timestamps) of the previous record.
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.delete(link_key)
            pipe.hset(link_key, mapping=link_to_hash(link))
            pipe.sadd(self.keys.links_index_key(), canonical)
            pipe.execute()

        logger.debug('Saved link.', extra={'short': link.short, 'canonical': canonical})
        return self

    @handle_redis_errors
    @beartype
    def get(self, short: str, **kwargs) -> Link:
        """Retrieve the Link registered under canonicalize(short)

        Raises:
            LinkNotFoundError:
                If no Link is registered under the canonical key.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get('FOO.bar')
            Link(short='Foo.Bar', long='https://example.com', owner='foo@bar.com', ...)
        """
        data = self.redis.hgetall(self.keys.link_key(canonicalize(short)))
        if not data:
            raise LinkNotFoundError(f"Link '{short}' not found.")
        return link_from_hash(data)

    @handle_redis_errors
    @beartype
    def exists(self, short: str, **kwargs) -> bool:
        return bool(self.redis.exists(self.keys.link_key(canonicalize(short))))

    @handle_redis_errors
    def all(self, **kwargs) -> list[Link]:
        """Retrieve every stored Link (unspecified order, empty list if none)"""
        canonicals = self.redis.smembers(self.keys.links_index_key())
        if not canonicals:
            return []

        with self.redis.pipeline(transaction=True) as pipe:
            for canonical in canonicals:
                pipe.hgetall(self.keys.link_key(canonical))
            records = pipe.execute()

        # A Link deleted between SMEMBERS and HGETALL comes back empty.
        return [link_from_hash(data) for data in records if data]

    @handle_redis_errors
    @beartype
    def delete(self, short: str, **kwargs) -> 'LinkRedisDAO':
        """Remove the Link registered under canonicalize(short)

        Idempotent: deleting an absent Link is not an error. Click stats stored
        under the same canonical short name are left untouched.
        """
        canonical = canonicalize(short)
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.delete(self.keys.link_key(canonical))
            pipe.srem(self.keys.links_index_key(), canonical)
            pipe.execute()

        logger.debug('Deleted link.', extra={'short': short, 'canonical': canonical})
        return self

    @handle_redis_errors
    @beartype
    def by_owner(self, owner: str, **kwargs) -> list[Link]:
        """Retrieve every Link whose owner is byte-identical to `owner`

        No normalization is applied: 'bar@foo.com ' does not match 'bar@foo.com'.
        """
        return [link for link in self.all() if link.owner == owner]

    @handle_redis_errors
    @beartype
    def display_forms(self, keys: Iterable[str], **kwargs) -> dict[str, str]:
        """Map canonical short names to the short name registered under them

        Args:
            keys (Iterable[str]):
                Canonical short names.

        Returns:
            dict[str, str]:
                canonical -> registered short, for the keys that have a Link.
        """
        keys = list(keys)
        if not keys:
            return {}

        with self.redis.pipeline(transaction=True) as pipe:
            for canonical in keys:
                pipe.hget(self.keys.link_key(canonical), LinkField.SHORT)
            shorts = pipe.execute()

        return {canonical: short for canonical, short in zip(keys, shorts) if short is not None}
