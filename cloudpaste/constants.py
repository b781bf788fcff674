from enum import StrEnum


class Defaults:
    """Default lifecycle settings."""

    SHORTCODE_LENGTH = 8  # Paste identifier length (base62 characters)
    MAX_WRITE_RETRIES = None  # Optimistic write attempts per access; None retries until the view lands or a check fails
    CONFIG_COMPONENT = 'paste_lifecycle'  # AppConfig section read by build_paste_manager()


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        TEST_MODE = 'TEST_MODE'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'
