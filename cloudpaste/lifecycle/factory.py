"""Wire a PasteLifecycleManager from configuration

Functions:
    build_paste_manager(config: dict | None = None) -> PasteLifecycleManager
        Build the record store for the active backend and wrap it in a manager.
        Without an explicit config, the "paste_lifecycle" AppConfig section is loaded.

Example:
    >>> manager = build_paste_manager({'backend': 'memory', 'memory': {}})
    >>> isinstance(manager.dao, PasteMemoryDAO)
    True
"""

import logging

from cloudpaste.constants import Defaults
from cloudpaste.exceptions import BadConfigurationError
from cloudpaste.dao.base import PasteBaseDAO
from cloudpaste.dao.memory import PasteMemoryDAO
from cloudpaste.dao.redis import PasteRedisDAO
from cloudpaste.lifecycle.paste_lifecycle_manager import PasteLifecycleManager
from cloudpaste.types import ComponentConfig
from cloudpaste.utils.config import load_config, app_prefix


logger = logging.getLogger(__name__)


def build_paste_dao(config: ComponentConfig) -> PasteBaseDAO:
    """Instantiate the record store named by config['backend']

    Raises:
        BadConfigurationError:
            If the backend is unknown or its settings are missing.
        DataStoreError:
            If the Redis backend is unreachable.
    """
    backend = config.get('backend')
    if backend == 'redis':
        if not isinstance(config.get('redis'), dict):
            raise BadConfigurationError("Missing 'redis' settings for the redis backend.")
        redis_config = {f'redis_{k}': v for k, v in config['redis'].items()}
        return PasteRedisDAO(**redis_config, prefix=app_prefix())
    if backend == 'memory':
        logger.warning('Using the in-memory paste store. Pastes are lost on restart.')
        return PasteMemoryDAO()
    raise BadConfigurationError(f"Unsupported paste store backend: '{backend}'.")


def build_paste_manager(config: ComponentConfig | None = None) -> PasteLifecycleManager:
    """Build a PasteLifecycleManager from configuration

    Args:
        config (dict | None):
            {'backend': <name>, <name>: {...}, 'lifecycle': {...}} as returned by
            load_config(). Loaded from AppConfig when None.

    Returns:
        PasteLifecycleManager: manager bound to the configured record store.

    Raises:
        BadConfigurationError:
            If the backend or lifecycle settings are invalid.
    """
    if config is None:
        config = load_config(Defaults.CONFIG_COMPONENT)

    lifecycle = config.get('lifecycle') or {}
    shortcode_length = lifecycle.get('shortcode_length', Defaults.SHORTCODE_LENGTH)
    max_write_retries = lifecycle.get('max_write_retries', Defaults.MAX_WRITE_RETRIES)
    settings = [('shortcode_length', shortcode_length)]
    if max_write_retries is not None:
        settings.append(('max_write_retries', max_write_retries))
    for name, value in settings:
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise BadConfigurationError(f"Lifecycle setting '{name}' must be a positive integer (given value: {value!r}).")

    logger.debug('Building paste lifecycle manager.', extra={'backend': config.get('backend')})
    return PasteLifecycleManager(
        build_paste_dao(config),
        shortcode_length=shortcode_length,
        max_write_retries=max_write_retries,
    )
