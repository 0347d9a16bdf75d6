"""Unit tests for Redis DAO helpers.

Test coverage includes:
    1. handle_redis_errors decorator
       - Ensures the wrapped method executes and returns its result.
       - Ensures Redis connection errors and timeouts are converted into DataStoreError.
       - Ensures other Redis errors (e.g. aborted transactions) are converted into DataStoreError.
       - Confirms functools.wraps preserves the original function's name and docstring.
    2. Link hash (de)serialization
       - Ensures optional timestamps are omitted when unset and restored when set.
"""

from datetime import datetime, UTC
from unittest.mock import MagicMock

import pytest
import redis

from golinks.dao.exceptions import DataStoreError
from golinks.dao.redis.helpers import handle_redis_errors, link_to_hash, link_from_hash
from golinks.models import Link


class DummyDAO:
    def __init__(self):
        self.redis = MagicMock()
        self.redis.connection_pool.connection_kwargs = {
            'host': 'localhost',
            'port': 6379,
            'db': 0,
        }

    @handle_redis_errors
    def ping(self):
        return 'OK'

    @handle_redis_errors
    def unreachable(self):
        raise redis.exceptions.ConnectionError('Cannot connect')

    @handle_redis_errors
    def slow(self):
        raise redis.exceptions.TimeoutError('Timeout reading from socket')

    @handle_redis_errors
    def aborted(self):
        raise redis.exceptions.ExecAbortError('Transaction discarded because of previous errors.')


# -------------------------------
# 1. handle_redis_errors decorator
# -------------------------------


def test_decorator_allows_normal_execution():
    """Ensure the wrapped function executes normally when no error occurs."""
    assert DummyDAO().ping() == 'OK'


@pytest.mark.parametrize('method', ['unreachable', 'slow'])
def test_decorator_transforms_connectivity_errors(method):
    """Ensure Redis ConnectionError/TimeoutError is re-raised as DataStoreError."""
    dao = DummyDAO()

    with pytest.raises(DataStoreError, match="Can't connect to Redis at localhost:6379/0.") as exc_info:
        getattr(dao, method)()

    assert isinstance(exc_info.value.__cause__, redis.exceptions.RedisError)


def test_decorator_transforms_other_redis_errors():
    """Ensure non-connectivity Redis errors are re-raised as DataStoreError."""
    with pytest.raises(DataStoreError, match="Redis operation 'aborted' failed"):
        DummyDAO().aborted()


def test_decorator_preserves_function_metadata():
    """Ensure function name and docstring are preserved via functools.wraps."""

    @handle_redis_errors
    def sample_function():
        """This is a sample docstring."""
        return 'OK'

    assert sample_function.__name__ == 'sample_function'
    assert 'sample docstring' in sample_function.__doc__


# -------------------------------
# 2. Link hash (de)serialization
# -------------------------------


def test_link_to_hash_without_timestamps():
    mapping = link_to_hash(Link(short='Foo.Bar', long='https://example.com', owner='foo@bar.com'))
    assert mapping == {'short': 'Foo.Bar', 'long': 'https://example.com', 'owner': 'foo@bar.com'}


def test_link_hash_keeps_timestamps():
    created = datetime(2025, 10, 1, 8, 30, tzinfo=UTC)
    last_edit = datetime(2025, 10, 15, 12, 0, 5, 123456, tzinfo=UTC)
    link = Link(short='a', long='https://a.example', created=created, last_edit=last_edit)

    mapping = link_to_hash(link)

    assert mapping['created'] == '2025-10-01T08:30:00+00:00'
    assert link_from_hash({str(k): v for k, v in mapping.items()}) == link


def test_link_from_hash_defaults_missing_fields():
    assert link_from_hash({'short': 'a'}) == Link(short='a', long='', owner='')
