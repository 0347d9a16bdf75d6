"""Utility functions for store configuration management.

Configuration for the link store lives in **AWS AppConfig**. Each environment
(`APP_ENV`) has a dedicated AppConfig *Environment* within the AppConfig
*Application* identified by `APP_NAME`. The JSON document follows this structure:

    {
        "build": 7,
        "active_backend": "redis",
        "configs": {
            "golinks": {
                "redis": {"host": "...", "port": 6379, "db": 0}
            }
        }
    }

A component loads its own section (e.g., `"golinks"`) and receives
`{"<backend>": {...}}`. When AppConfig isn't available (tests, a developer
laptop), `redis_config_from_env()` builds the same shape from `REDIS_*`
environment variables.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the Redis key prefix, or None if `APP_NAME` is not set.

    redis_config_from_env() -> dict
        Build a `{"redis": {...}}` configuration from `REDIS_*` environment variables.

    load_config(component: str) -> dict
        Load configuration for a component from AWS AppConfig (or a local
        AppConfig agent when running locally).

Example:
    >>> from golinks.utils.config import load_config
    >>> config = load_config('golinks')
    >>> config['redis']['host']
    'redis-15501.host.docker.internal'
"""

import os
import json
import functools
import logging
import urllib.parse
import urllib.request
from collections.abc import Callable

import boto3

from golinks.constants import (
    ENV,
    DEFAULT_REDIS_HOST,
    DEFAULT_REDIS_PORT,
    DEFAULT_REDIS_DB,
    DEFAULT_SOCKET_TIMEOUT,
)
from golinks.exceptions import BadConfigurationError
from golinks.utils.helpers import require_environment, env_int, env_float
from golinks.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'

    Returns:
        str:
            Value of `APP_NAME` environment variable.
            None if variable is not set.
    """
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return the key prefix for the store

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'golinks'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'golinks:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def redis_config_from_env() -> dict:
    """Build a Redis configuration section from environment variables

    Environment variables used (all optional):
        REDIS_HOST, REDIS_PORT, REDIS_DB, REDIS_USERNAME, REDIS_PASSWORD, REDIS_SOCKET_TIMEOUT

    Returns:
        dict: {"redis": {"host": ..., "port": ..., "db": ..., ...}}

    Raises:
        BadConfigurationError:
            If a numeric variable can't be parsed.
    """
    # fmt: off
    return {
        'redis': {
            'host': os.environ.get(ENV.Redis.HOST) or DEFAULT_REDIS_HOST,
            'port': env_int(ENV.Redis.PORT, DEFAULT_REDIS_PORT),
            'db': env_int(ENV.Redis.DB, DEFAULT_REDIS_DB),
            'username': os.environ.get(ENV.Redis.USERNAME) or None,
            'password': os.environ.get(ENV.Redis.PASSWORD) or None,
            'socket_timeout': env_float(ENV.Redis.SOCKET_TIMEOUT, DEFAULT_SOCKET_TIMEOUT),
        }
    }
    # fmt: on


def _extract_section(document: dict, component: str) -> dict:
    try:
        backend = document['active_backend']
        return {backend: document['configs'][component][backend]}
    except KeyError as e:
        raise BadConfigurationError(f"AppConfig document has no configuration for component '{component}'.") from e


def _load_local_appconfig(func: Callable[[str], dict]) -> Callable[[str], dict]:
    """Decorator: load AppConfig from a local AppConfig Agent when running locally

    Behavior:
        - If running locally and `APPCONFIG_AGENT_URL` is set to a safe local URL,
          fetch the configuration JSON from the local AppConfig agent.
        - Else, call the wrapped function (which pulls from AWS AppConfig via boto3).

    Environment variables used:
        APPCONFIG_AGENT_URL     – Base URL of the local AppConfig Agent (e.g., http://localhost:2772).
        APPCONFIG_PROFILE_NAME  – Optional profile name (default: "backend-config").
    """

    def _validate_agent_url(url: str | None) -> str:
        if not url:
            return ''
        components = urllib.parse.urlparse(url)
        if components.scheme not in {'http', 'https'}:
            raise BadConfigurationError(f'Bad scheme {url}')
        if components.hostname not in {'localhost', '127.0.0.1', 'host.docker.internal'}:
            raise BadConfigurationError(f'Bad host {url}')
        if components.port not in {2772, None}:
            raise BadConfigurationError(f'Bad port {url}')
        return url

    @functools.wraps(func)
    def wrapper(component: str, *args, **kwargs) -> dict:
        agent_url = _validate_agent_url(os.getenv(ENV.AppConfig.AGENT_URL))
        if not running_locally() or not agent_url:
            return func(component, *args, **kwargs)

        profile_name = os.getenv(ENV.AppConfig.PROFILE_NAME, 'backend-config')
        url = f'{agent_url}/applications/{app_name()}/environments/{app_env()}/configurations/{profile_name}'

        logger.debug('Trying to load AppConfig from local agent.', extra={'agentUrl': url, 'component': component})
        with urllib.request.urlopen(url, timeout=5) as r:  # noqa: S310
            document = json.load(r)

        data = _extract_section(document, component)
        logger.debug('Loaded AppConfig from local agent.', extra={'component': component, 'build': document.get('build')})
        return data

    return wrapper


@_load_local_appconfig
@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def load_config(component: str) -> dict:
    """Load configuration for a given component from AWS AppConfig

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Args:
        component (str):
            Name of the component section (e.g., "golinks").

    Returns:
        dict: The component's active backend section, e.g. {"redis": {...}}.

    Raises:
        MissingEnvironmentVariableError:
            If an AppConfig identifier is missing.
        BadConfigurationError:
            If the document has no section for the component.
        botocore.exceptions.ClientError:
            If AppConfig rejects the request.
    """
    logger.debug('Trying to load AppConfig from AWS AppConfig.', extra={'component': component})

    appconfig = boto3.client('appconfigdata')

    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']

    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    content = response['Configuration'].read()
    document = json.loads(content.decode('utf-8'))

    data = _extract_section(document, component)
    logger.debug('Loaded AppConfig from AWS AppConfig.', extra={'component': component, 'build': document.get('build')})
    return data
