"""Data Access Object (DAO) implementation for click stats in Redis

Click counts live in a single Redis hash keyed by canonical short name:

    <prefix>:stats:clicks  - hash {<canonical>: <count>}

Writes only ever add (HINCRBY), so counts reported under different spellings
of a short name ("b-c", "bc", "B.C") merge into one counter regardless of the
order or batching of the reports. Reads resolve each canonical short name to
the display form currently registered in the Link store.

Example:
    >>> from golinks.dao.redis import LinkRedisDAO, StatsRedisDAO

    >>> links = LinkRedisDAO(prefix='golinks:dev')
    >>> links.save(Link(short='B-c'))
    >>> stats = StatsRedisDAO(links=links)
    >>> stats.save({'b-c': 1}).save({'bc': 2})
    <StatsRedisDAO>
    >>> stats.load()
    {'B-c': 3}

NOTE:
    A batch is not idempotent. Retrying a batch whose EXEC succeeded but whose
    reply was lost (e.g. a socket timeout after commit) counts it twice.
"""

import logging
from collections import defaultdict
from typing import Optional

import redis
from beartype import beartype

from golinks.constants import MAX_CLICK_COUNT
from golinks.models import ClickStats
from golinks.dao.base import LinkBaseDAO, StatsBaseDAO
from golinks.dao.redis.mixins import RedisClientMixin
from golinks.dao.redis.link_redis_dao import LinkRedisDAO
from golinks.dao.redis.helpers import handle_redis_errors
from golinks.utils.canonical import canonicalize


logger = logging.getLogger(__name__)


def _check_count(short: str, count: int) -> None:
    if count < 0:
        raise ValueError(f"Click count for '{short}' must be non-negative (given: {count}).")
    if count > MAX_CLICK_COUNT:
        raise ValueError(f"Click count for '{short}' must not exceed {MAX_CLICK_COUNT} (given: {count}).")


class StatsRedisDAO(RedisClientMixin, StatsBaseDAO):
    """Redis-based Data Access Object (DAO) for click stats

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.
        links (LinkBaseDAO):
            Link store used to resolve display forms on read.
    """

    def __init__(self, links: Optional[LinkBaseDAO] = None, **kwargs):
        """Initialize the stats DAO

        Args:
            links (Optional[LinkBaseDAO]):
                Link store used for display form resolution. If None, a
                LinkRedisDAO sharing this DAO's Redis client and prefix is created.
            **kwargs:
                Redis connection parameters (see RedisClientMixin).
        """
        super().__init__(**kwargs)
        if links is None:
            links = LinkRedisDAO(redis_client=self.redis, prefix=self.keys.prefix)
        self.links = links

    @handle_redis_errors
    @beartype
    def save(self, observations: ClickStats, **kwargs) -> 'StatsRedisDAO':
        """Merge a batch of click observations into the stored counters

        Observations are first folded per canonical short name, then applied as
        HINCRBY commands inside one MULTI/EXEC transaction: concurrent readers
        see the whole batch or none of it, and concurrent batches touching the
        same counter are both reflected in the final sum.

        Redis doesn't roll back a transaction when one of its commands fails,
        so the counters are WATCHed and checked for int64 overflow before
        MULTI. If another writer touches the counters in between, EXEC is
        discarded and the batch is checked and queued again.

        Args:
            observations (ClickStats):
                Short name (any display form) -> non-negative increment.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            StatsRedisDAO: self (for method chaining)

        Raises:
            ValueError:
                If an increment is negative or a counter would exceed
                MAX_CLICK_COUNT. Nothing is written.
            DataStoreError:
                If a Redis issue occurs. Nothing is written.
        """
        increments = defaultdict(int)
        for short, count in observations.items():
            _check_count(short, count)
            increments[canonicalize(short)] += count

        if not increments:
            return self

        stats_key = self.keys.click_stats_key()
        canonicals = list(increments)
        with self.redis.pipeline(transaction=True) as pipe:
            while True:
                try:
                    pipe.watch(stats_key)
                    stored = pipe.hmget(stats_key, canonicals)
                    for canonical, current in zip(canonicals, stored):
                        if int(current or 0) + increments[canonical] > MAX_CLICK_COUNT:
                            raise ValueError(f"Click count for '{canonical}' would exceed {MAX_CLICK_COUNT}.")

                    pipe.multi()
                    for canonical in canonicals:
                        pipe.hincrby(stats_key, canonical, increments[canonical])
                    pipe.execute()
                    break
                except redis.exceptions.WatchError:
                    logger.debug('Click stats changed while saving, retrying batch.', extra={'keys': len(canonicals)})

        logger.debug('Saved click stats.', extra={'keys': len(increments)})
        return self

    @handle_redis_errors
    def load(self, **kwargs) -> ClickStats:
        """Return every counter keyed by its display form

        The display form is the short name registered in the Link store for
        the counter's canonical short name, or the canonical short name itself
        when no Link is registered (orphaned stats).

        Example:
            >>> stats.load()
            {'a': 2, 'B-c': 3}
        """
        counts = {canonical: int(count) for canonical, count in self.redis.hgetall(self.keys.click_stats_key()).items()}
        display_forms = self.links.display_forms(counts.keys())
        return {display_forms.get(canonical, canonical): count for canonical, count in counts.items()}

    @handle_redis_errors
    @beartype
    def delete(self, short: str, **kwargs) -> 'StatsRedisDAO':
        """Remove the counter for canonicalize(short). Idempotent.

        The Link registered under the same canonical short name is left untouched.
        """
        canonical = canonicalize(short)
        self.redis.hdel(self.keys.click_stats_key(), canonical)
        logger.debug('Deleted click stats.', extra={'short': short, 'canonical': canonical})
        return self

    @handle_redis_errors
    @beartype
    def incr(self, short: str, count: int = 1, **kwargs) -> int:
        """Add `count` clicks to a single counter and return its new value

        Example:
            >>> stats.incr('B-C')
            4
        """
        _check_count(short, count)
        return self.redis.hincrby(self.keys.click_stats_key(), canonicalize(short), count)

    @handle_redis_errors
    @beartype
    def get(self, short: str, **kwargs) -> int:
        """Return the click count for canonicalize(short), 0 if none was recorded"""
        count = self.redis.hget(self.keys.click_stats_key(), canonicalize(short))
        return int(count) if count is not None else 0
