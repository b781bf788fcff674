from dataclasses import dataclass


# fmt: off
@dataclass(frozen=True)
class PasteView:
    content: str                        # Paste text, unchanged
    remaining_views: int | None = None  # Views left after this one (None when unlimited)
    expires_at: str | None = None       # ISO-8601 UTC expiry, e.g. '1970-01-01T00:01:01.000Z' (None when no TTL)
# fmt: on
