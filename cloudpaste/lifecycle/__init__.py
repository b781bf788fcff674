from cloudpaste.lifecycle.constants import NotFoundReason
from cloudpaste.lifecycle.exceptions import (
    LifecycleError,
    InvalidPasteError,
    InvalidContentError,
    InvalidTTLError,
    InvalidMaxViewsError,
    PasteNotFoundError,
    PasteContentionError,
)
from cloudpaste.lifecycle.paste_lifecycle_manager import PasteLifecycleManager
from cloudpaste.lifecycle.factory import build_paste_dao, build_paste_manager


__all__ = [
    'NotFoundReason',
    'LifecycleError',
    'InvalidPasteError',
    'InvalidContentError',
    'InvalidTTLError',
    'InvalidMaxViewsError',
    'PasteNotFoundError',
    'PasteContentionError',
    'PasteLifecycleManager',
    'build_paste_dao',
    'build_paste_manager',
]
