from golinks.dao.redis.redis_key_schema import RedisKeySchema
from golinks.dao.redis.link_redis_dao import LinkRedisDAO
from golinks.dao.redis.stats_redis_dao import StatsRedisDAO
from golinks.dao.redis.mixins import RedisClientMixin


__all__ = [
    'RedisKeySchema',
    'LinkRedisDAO',
    'StatsRedisDAO',
    'RedisClientMixin',
]
