from enum import StrEnum


class LinkField(StrEnum):
    """Hash fields of a stored link record."""

    SHORT = 'short'
    LONG = 'long'
    OWNER = 'owner'
    CREATED = 'created'
    LAST_EDIT = 'last_edit'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105
        SOCKET_TIMEOUT = 'REDIS_SOCKET_TIMEOUT'


# Default Redis connection parameters
DEFAULT_REDIS_HOST = 'localhost'
DEFAULT_REDIS_PORT = 6379
DEFAULT_REDIS_DB = 0
DEFAULT_SOCKET_TIMEOUT = 5.0  # seconds

# AppConfig component section holding the store configuration
DEFAULT_COMPONENT = 'golinks'

# Largest value a Redis hash counter (HINCRBY) can hold: signed 64-bit
MAX_CLICK_COUNT = 2**63 - 1
