"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if the process runs in a local environment, False otherwise.

Example:
    >>> from golinks.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
    >>> os.environ['APP_ENV'] = 'dev'
    >>> running_locally()
    False
"""

import os

from golinks.constants import ENV


def running_locally() -> bool:
    """Check if the process is running locally (dev box or sam local invoke)

    Returns:
        bool: True if running locally, False otherwise.
    """
    env = os.getenv(ENV.App.APP_ENV, '').lower()
    return env == 'local' or os.getenv(ENV.App.AWS_SAM_LOCAL) == 'true'
