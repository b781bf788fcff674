"""Wall clock in milliseconds, with a test-time override

All lifecycle decisions take the current time as an explicit argument. This
module provides the default value for it.

Functions:
    now_ms(test_now_ms: int | None = None) -> int
        Current time in milliseconds since the UNIX epoch. When TEST_MODE=1 and
        `test_now_ms` is given, that value is returned instead.

Example:
    >>> os.environ['TEST_MODE'] = '1'
    >>> now_ms(test_now_ms=61_000)
    61000
    >>> os.environ['TEST_MODE'] = '0'
    >>> now_ms(test_now_ms=61_000)  # override ignored outside test mode
    1760875200000
"""

import time

from cloudpaste.utils.runtime import in_test_mode


def now_ms(test_now_ms: int | None = None) -> int:
    if test_now_ms is not None and in_test_mode():
        return int(test_now_ms)
    return int(time.time() * 1000)
