from golinks.utils.canonical import canonicalize
from golinks.utils.config import app_env, app_name, app_prefix, load_config, redis_config_from_env
from golinks.utils.helpers import require_environment
from golinks.utils.logging import initialize_logging


__all__ = [
    'canonicalize',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'redis_config_from_env',
    'require_environment',
    'initialize_logging',
]
