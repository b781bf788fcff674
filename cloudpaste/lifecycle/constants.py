from enum import StrEnum


# Log event codes
PASTE_CREATED = 'PASTE_CREATED'
PASTE_VIEWED = 'PASTE_VIEWED'
PASTE_NOT_FOUND = 'PASTE_NOT_FOUND'
PASTE_VIEW_CONFLICT = 'PASTE_VIEW_CONFLICT'
PASTE_VALIDATION_FAILED = 'PASTE_VALIDATION_FAILED'


class NotFoundReason(StrEnum):
    """Why an access ended in PasteNotFoundError (internal, never shown to callers)."""

    MISSING = 'missing'
    EXPIRED = 'expired'
    EXHAUSTED = 'exhausted'
