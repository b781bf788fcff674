"""Helper utilities shared across the application.

Functions:
    iso_timestamp(ms: int) -> str
        Render milliseconds since the UNIX epoch as an ISO-8601 UTC string
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present

Example:
    >>> from cloudpaste.utils.helpers import iso_timestamp
    >>> iso_timestamp(61_000)
    '1970-01-01T00:01:01.000Z'
"""

import os
import functools
from datetime import datetime, timedelta, UTC
from collections.abc import Callable

from cloudpaste.exceptions import MissingEnvironmentVariableError


EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# Latest millisecond iso_timestamp() can render: 9999-12-31T23:59:59.999Z
MAX_TIMESTAMP_MS = (datetime.max.replace(tzinfo=UTC) - EPOCH) // timedelta(milliseconds=1)


def iso_timestamp(ms: int) -> str:
    """Render a millisecond timestamp as ISO-8601 UTC with millisecond precision.

    The output matches JavaScript's `Date.prototype.toISOString()`.

    Args:
        ms (int): milliseconds since the UNIX epoch

    Returns:
        str: e.g. '2025-10-15T12:00:00.000Z'

    Raises:
        OverflowError: If `ms` is past MAX_TIMESTAMP_MS.
    """
    # NOTE: timedelta arithmetic keeps exact milliseconds (no float rounding)
    # fmt: off
    return (EPOCH + timedelta(milliseconds=ms)) \
                .isoformat(timespec='milliseconds') \
                .replace('+00:00', 'Z')
    # fmt: on


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: APPCONFIG_APP_ID, APPCONFIG_ENV_ID
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {", ".join(missing)}')
            return func(*args, **kwargs)

        return wrapper

    return decorator
