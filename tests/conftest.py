import fakeredis
import pytest

from golinks.dao.redis import LinkRedisDAO, StatsRedisDAO
from golinks.service import LinkService


@pytest.fixture
def fake_redis():
    """In-process Redis server with real transaction and hash semantics."""
    client = fakeredis.FakeRedis(decode_responses=True)
    yield client
    client.flushall()


@pytest.fixture
def link_dao(fake_redis):
    return LinkRedisDAO(redis_client=fake_redis, prefix='testapp:test')


@pytest.fixture
def stats_dao(fake_redis, link_dao):
    return StatsRedisDAO(links=link_dao, redis_client=fake_redis, prefix='testapp:test')


@pytest.fixture
def service(link_dao, stats_dao):
    return LinkService(links=link_dao, stats=stats_dao)
