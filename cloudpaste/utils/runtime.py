"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if the application runs in a local environment, False otherwise.

    in_test_mode() -> bool:
        True if deterministic test-time overrides are enabled.

Example:
    >>> from cloudpaste.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
    >>> os.environ['APP_ENV'] = 'dev'
    >>> running_locally()
    False
"""

import os

from cloudpaste.constants import ENV


def running_locally() -> bool:
    """Check if the application is running locally (APP_ENV=local or via sam local invoke)

    Returns:
        bool: True if running locally, False otherwise.
    """
    env = os.getenv(ENV.App.APP_ENV, '').lower()
    return env == 'local' or os.getenv(ENV.App.AWS_SAM_LOCAL) == 'true'


def in_test_mode() -> bool:
    """Check if TEST_MODE=1, which lets callers pin the current time

    Returns:
        bool: True if test mode is enabled, False otherwise.
    """
    return os.getenv(ENV.App.TEST_MODE) == '1'
