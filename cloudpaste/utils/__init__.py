from cloudpaste.utils.config import app_env, app_name, app_prefix, load_config
from cloudpaste.utils.helpers import iso_timestamp, require_environment
from cloudpaste.utils.shortener import generate_shortcode
from cloudpaste.utils.clock import now_ms
from cloudpaste.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'iso_timestamp',
    'require_environment',
    'now_ms',
    'initialize_logging',
]
