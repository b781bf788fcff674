"""Exceptions raised by the paste lifecycle manager.

Classes:
    LifecycleError:
        Generic base class for lifecycle exceptions.

    InvalidPasteError:
        Base class for rejected create() input. Never retried.

    InvalidContentError / InvalidTTLError / InvalidMaxViewsError:
        One per validated create() argument.

    PasteNotFoundError:
        The paste doesn't exist, expired, or has no views left. The public message
        is the same in all three cases; the cause is kept on `reason` for logging.

    PasteContentionError:
        Concurrent readers kept winning the optimistic write; no view was consumed.
"""

from cloudpaste.exceptions import CloudPasteError
from cloudpaste.lifecycle.constants import NotFoundReason


class LifecycleError(CloudPasteError):
    """Generic base class for lifecycle exceptions."""

    error_code = 'lifecycle:lifecycle_error'


class InvalidPasteError(LifecycleError):
    """Base class for invalid paste creation input."""

    error_code = 'lifecycle:invalid_paste_error'


class InvalidContentError(InvalidPasteError):
    """Raised when content is not a non-empty string."""

    error_code = 'lifecycle:invalid_content_error'


class InvalidTTLError(InvalidPasteError):
    """Raised when ttl_seconds is given but is not a positive integer."""

    error_code = 'lifecycle:invalid_ttl_error'


class InvalidMaxViewsError(InvalidPasteError):
    """Raised when max_views is given but is not a positive integer."""

    error_code = 'lifecycle:invalid_max_views_error'


class PasteNotFoundError(LifecycleError):
    """Raised when a paste is missing, expired or exhausted."""

    error_code = 'lifecycle:paste_not_found_error'

    def __init__(self, paste_id: str, reason: NotFoundReason = NotFoundReason.MISSING):
        super().__init__(f"Paste '{paste_id}' not found.")
        self.paste_id = paste_id
        self.reason = reason


class PasteContentionError(LifecycleError):
    """Raised when a view couldn't be recorded within the write retry budget."""

    error_code = 'lifecycle:paste_contention_error'
