from dataclasses import dataclass


@dataclass(frozen=True)
class PasteModel:
    """Represent a stored paste record.

    Attributes:
        paste_id (str):
            Unique short identifier the paste is addressed by.
        content (str):
            The pasted text, stored exactly as submitted.
        created_at (int):
            Creation time in milliseconds since the UNIX epoch.
        ttl_seconds (int | None):
            Seconds after creation at which the paste expires.
            None means the paste never expires by time.
        max_views (int | None):
            Number of successful reads the paste allows.
            None means unlimited views.
        views (int):
            Successful reads so far.

    Example:
        >>> paste = PasteModel(
        ...     paste_id='Xq3bT9aZ',
        ...     content='hello',
        ...     created_at=1_000,
        ...     ttl_seconds=60,
        ...     max_views=3,
        ... )
        >>> paste.expires_at_ms
        61000
        >>> paste.is_expired(60_999)
        False
        >>> paste.remaining_views
        3
    """

    paste_id: str
    content: str
    created_at: int
    ttl_seconds: int | None = None
    max_views: int | None = None
    views: int = 0

    @property
    def expires_at_ms(self) -> int | None:
        if self.ttl_seconds is None:
            return None
        return self.created_at + self.ttl_seconds * 1000

    def is_expired(self, now: int) -> bool:
        """True once `now` reaches the expiry moment (the boundary itself is expired)."""
        expires_at = self.expires_at_ms
        return expires_at is not None and now >= expires_at

    @property
    def is_exhausted(self) -> bool:
        return self.max_views is not None and self.views >= self.max_views

    @property
    def remaining_views(self) -> int | None:
        if self.max_views is None:
            return None
        return max(0, self.max_views - self.views)
