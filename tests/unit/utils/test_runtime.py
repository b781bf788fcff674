"""Unit tests for runtime utilities in runtime.py.

Test coverage includes:

1. running_locally() behavior
2. in_test_mode() behavior
"""

import pytest

from cloudpaste.constants import ENV
from cloudpaste.utils.runtime import running_locally, in_test_mode


@pytest.mark.parametrize(
    'app_env, sam_flag, expected',
    [
        ('local', None, True),
        ('LOCAL', None, True),
        ('dev', None, False),
        ('dev', 'true', True),
    ],
)
def test_running_locally(monkeypatch, app_env, sam_flag, expected):
    """running_locally() evaluates local execution correctly."""
    monkeypatch.setenv(ENV.App.APP_ENV, app_env)

    if sam_flag is None:
        monkeypatch.delenv(ENV.App.AWS_SAM_LOCAL, raising=False)
    else:
        monkeypatch.setenv(ENV.App.AWS_SAM_LOCAL, sam_flag)

    assert running_locally() is expected


@pytest.mark.parametrize('value, expected', [('1', True), ('0', False), ('true', False), (None, False)])
def test_in_test_mode(monkeypatch, value, expected):
    if value is None:
        monkeypatch.delenv(ENV.App.TEST_MODE, raising=False)
    else:
        monkeypatch.setenv(ENV.App.TEST_MODE, value)

    assert in_test_mode() is expected
