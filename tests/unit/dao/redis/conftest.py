from unittest.mock import MagicMock

import pytest
import redis

from golinks.dao.redis import RedisKeySchema


@pytest.fixture
def app_prefix() -> str:
    """Provide a consistent Redis key prefix for testing."""
    return 'testapp:test'


@pytest.fixture
def redis_client() -> redis.Redis:
    """Mock a Redis pipeline-compatible client."""
    client = MagicMock(spec=redis.client.Pipeline)
    client.connection_pool = MagicMock(
        spec=redis.ConnectionPool,
        connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0},
    )
    client.exists.return_value = 0
    client.pipeline.return_value = client
    client.__enter__.return_value = client
    client.__exit__.return_value = None
    client.hgetall.return_value = {}
    client.smembers.return_value = set()
    client.hmget.side_effect = lambda key, fields: [None] * len(fields)
    client.execute.return_value = []
    return client


@pytest.fixture
def key_schema(app_prefix) -> RedisKeySchema:
    return RedisKeySchema(prefix=app_prefix)
