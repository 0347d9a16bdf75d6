"""Read/write facade over the Link and click stats stores

`LinkService` is the entry point the HTTP layer talks to. It composes a Link
DAO and a click stats DAO that share one storage handle, and exposes the
operations the HTTP layer needs under their service names:

    save, load, load_all, delete, get_links_by_owner,
    save_stats, load_stats, delete_stats, stats_for

Any output that combines both stores is keyed by display form (the short name
as registered), never by canonical short name, unless no Link is registered.

Example:
    >>> from golinks.service import open_service
    >>> with open_service() as service:
    ...     service.save(Link(short='B-c', long='https://example.com/bc'))
    ...     service.save_stats({'b-c': 1})
    ...     service.save_stats({'bc': 2})
    ...     service.load_stats()
    {'B-c': 3}
"""

import logging
from typing import Optional

from golinks.constants import DEFAULT_COMPONENT
from golinks.dao.base import LinkBaseDAO, StatsBaseDAO
from golinks.dao.redis import LinkRedisDAO, StatsRedisDAO
from golinks.exceptions import BadConfigurationError, MissingEnvironmentVariableError
from golinks.models import Link, ClickStats
from golinks.utils.config import app_prefix, load_config, redis_config_from_env
from golinks.utils.logging import initialize_logging


logger = logging.getLogger(__name__)

# AppConfig redis section key -> RedisClientMixin keyword argument
REDIS_CONFIG_KWARGS = {
    'host': 'redis_host',
    'port': 'redis_port',
    'db': 'redis_db',
    'username': 'redis_username',
    'password': 'redis_password',
    'socket_timeout': 'redis_socket_timeout',
}


class LinkService:
    """Compose the Link store and the click stats store

    Attributes:
        links (LinkBaseDAO):
            Link store.
        stats (StatsBaseDAO):
            Click stats store, resolving display forms through `links`.
    """

    def __init__(self, links: LinkBaseDAO, stats: StatsBaseDAO):
        self.links = links
        self.stats = stats

    @classmethod
    def from_config(cls, config: dict, prefix: Optional[str] = None) -> 'LinkService':
        """Open the stores described by a backend configuration section

        Args:
            config (dict):
                {"redis": {"host": ..., "port": ..., "db": ..., ...}} as returned
                by load_config() or redis_config_from_env().
            prefix (Optional[str]):
                Key namespace, e.g. 'golinks:prod'.

        Returns:
            LinkService: service owning a freshly opened Redis client.

        Raises:
            BadConfigurationError:
                If the configuration names an unsupported backend.
            DataStoreInitError:
                If the store can't be reached.
        """
        if 'redis' not in config:
            raise BadConfigurationError(f'Unsupported store backend(s): {sorted(config)}. Expected "redis".')

        options = {REDIS_CONFIG_KWARGS[key]: value for key, value in config['redis'].items() if key in REDIS_CONFIG_KWARGS}
        links = LinkRedisDAO(**options, prefix=prefix)
        try:
            stats = StatsRedisDAO(links=links, redis_client=links.redis, prefix=prefix)
        except Exception:
            links.close()
            raise

        logger.info('Opened link store.', extra={'backend': 'redis', 'prefix': prefix})
        return cls(links=links, stats=stats)

    # ---- Links ------------------------------------------------------------

    def save(self, link: Link) -> None:
        self.links.save(link)

    def load(self, short: str) -> Link:
        """Return the Link registered under any spelling of `short`

        Raises:
            LinkNotFoundError: if no Link is registered.
        """
        return self.links.get(short)

    def load_all(self) -> list[Link]:
        return self.links.all()

    def delete(self, short: str) -> None:
        self.links.delete(short)

    def get_links_by_owner(self, owner: str) -> list[Link]:
        return self.links.by_owner(owner)

    # ---- Click stats ------------------------------------------------------

    def save_stats(self, observations: ClickStats) -> None:
        self.stats.save(observations)

    def load_stats(self) -> ClickStats:
        return self.stats.load()

    def delete_stats(self, short: str) -> None:
        self.stats.delete(short)

    def stats_for(self, short: str) -> int:
        """Return the click count of a single short name (any spelling), 0 if none"""
        return self.stats.get(short)

    # ---- Lifecycle --------------------------------------------------------

    def close(self) -> None:
        self.stats.close()
        self.links.close()

    def __enter__(self) -> 'LinkService':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def open_service(component: str = DEFAULT_COMPONENT, prefix: Optional[str] = None, configure_logging: bool = False) -> LinkService:
    """Open a LinkService from AppConfig, falling back to REDIS_* environment variables

    AppConfig is used when its identifiers are present in the environment
    (see load_config()). Otherwise the Redis section is built from the
    environment with redis_config_from_env().

    Args:
        component (str):
            AppConfig section to read. Defaults to 'golinks'.
        prefix (Optional[str]):
            Key namespace. Defaults to app_prefix() (<APP_NAME>:<APP_ENV>).
        configure_logging (bool):
            Call initialize_logging() first. For processes with no logging setup of their own.
    """
    if configure_logging:
        initialize_logging()

    try:
        config = load_config(component)
    except MissingEnvironmentVariableError:
        logger.info('AppConfig not configured, reading store configuration from environment.', extra={'component': component})
        config = redis_config_from_env()

    return LinkService.from_config(config, prefix=prefix if prefix is not None else app_prefix())
