"""Paste lifecycle manager: creation, conditional access and lazy expiry

Rules enforced here (the DAO only stores records):
    - create() validates input, assigns a random id and stores a fresh record.
    - access() serves a paste until its TTL elapses or its view limit is reached.
      TTL expiry is detected lazily on access and deletes the record.
      Exhausted records stay stored but are never served again.
    - Missing, expired and exhausted pastes all raise PasteNotFoundError; the
      concrete reason only shows up in the logs.

Concurrency:
    access() is a read-check-increment-write cycle. The write is conditional
    (DAO.compare_and_set against the record that was read), so two readers racing
    for the last view can't both succeed: the loser re-reads, sees the paste
    exhausted and gets PasteNotFoundError. Every lost write means another reader
    committed, so by default access() keeps retrying until its own write lands or
    a check fails. With a `max_write_retries` bound, a reader that loses that many
    rounds gets PasteContentionError and no view is consumed.

Example:
    >>> manager = PasteLifecycleManager(PasteMemoryDAO())
    >>> paste_id = manager.create('hello', max_views=1, now=1_000)
    >>> manager.access(paste_id, now=2_000)
    PasteView(content='hello', remaining_views=0, expires_at=None)
    >>> manager.access(paste_id, now=3_000)
    Traceback (most recent call last):
        ...
    cloudpaste.lifecycle.exceptions.PasteNotFoundError: Paste '...' not found.
"""

import logging
import itertools
from dataclasses import replace
from typing import Any

from beartype import beartype

from cloudpaste.constants import Defaults
from cloudpaste.dao.base import PasteBaseDAO
from cloudpaste.models import PasteModel, PasteView
from cloudpaste.dao.exceptions import CorruptRecordError
from cloudpaste.types import Clock
from cloudpaste.utils.clock import now_ms
from cloudpaste.utils.helpers import iso_timestamp, MAX_TIMESTAMP_MS
from cloudpaste.utils.shortener import generate_shortcode
from cloudpaste.lifecycle.constants import (
    NotFoundReason,
    PASTE_CREATED,
    PASTE_VIEWED,
    PASTE_NOT_FOUND,
    PASTE_VIEW_CONFLICT,
    PASTE_VALIDATION_FAILED,
)
from cloudpaste.lifecycle.exceptions import (
    InvalidPasteError,
    InvalidContentError,
    InvalidTTLError,
    InvalidMaxViewsError,
    PasteNotFoundError,
    PasteContentionError,
)


logger = logging.getLogger(__name__)


def _positive_integer(value: Any, error: type[InvalidPasteError], name: str) -> int | None:
    """Return `value` as an int if it's a positive integer, None if it's None

    Integral floats (e.g. 60.0) count as integers, like JSON numbers do.
    Booleans, strings and non-integral numbers don't.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise error(f'{name} must be a positive integer (given type: bool).')
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    else:
        raise error(f'{name} must be a positive integer (given value: {value!r}).')
    if number < 1:
        raise error(f'{name} must be a positive integer (given value: {value!r}).')
    return number


class PasteLifecycleManager:
    """Create and serve pastes with TTL and view-limit expiry

    Attributes:
        dao (PasteBaseDAO):
            Record store for paste records.
        clock (Clock):
            Source of the current time in ms, used when a call doesn't pass `now`.
        shortcode_length (int):
            Length of generated paste ids.
        max_write_retries (int | None):
            Conditional write attempts per access() before PasteContentionError.
            None (the default) retries until the view is recorded or a check fails.
    """

    def __init__(
        self,
        dao: PasteBaseDAO,
        clock: Clock = now_ms,
        shortcode_length: int = Defaults.SHORTCODE_LENGTH,
        max_write_retries: int | None = Defaults.MAX_WRITE_RETRIES,
    ):
        if max_write_retries is not None and max_write_retries < 1:
            raise ValueError(f'max_write_retries must be a positive integer (given value: {max_write_retries}).')

        self.dao = dao
        self.clock = clock
        self.shortcode_length = shortcode_length
        self.max_write_retries = max_write_retries

    def create(self, content: Any, ttl_seconds: Any = None, max_views: Any = None, *, now: int | None = None) -> str:
        """Validate input and store a new paste

        Validation runs in this order and stops at the first failure; nothing is
        written unless all checks pass.

        Args:
            content (str):
                Paste text. Must contain something other than whitespace.
                Stored as given (not stripped).
            ttl_seconds (int | None):
                Lifetime in seconds. None means no time-based expiry.
            max_views (int | None):
                Number of allowed views. None means unlimited.
            now (int | None):
                Creation time in ms since the epoch. Defaults to the manager clock.

        Returns:
            str: The new paste id.

        Raises:
            InvalidContentError:
                If content is not a string or is blank.
            InvalidTTLError:
                If ttl_seconds is given but isn't a positive integer, or the paste
                would expire after 9999-12-31T23:59:59.999Z.
            InvalidMaxViewsError:
                If max_views is given but isn't a positive integer.
            DataStoreError:
                If the record store is unreachable.
        """
        created_at = self.clock() if now is None else now
        try:
            if not isinstance(content, str) or not content.strip():
                raise InvalidContentError('content must be a non-empty string.')
            ttl_seconds = _positive_integer(ttl_seconds, InvalidTTLError, 'ttl_seconds')
            if ttl_seconds is not None and created_at + ttl_seconds * 1000 > MAX_TIMESTAMP_MS:
                raise InvalidTTLError(f'ttl_seconds puts the expiry past the latest supported timestamp (given value: {ttl_seconds}).')
            max_views = _positive_integer(max_views, InvalidMaxViewsError, 'max_views')
        except InvalidPasteError as error:
            logger.info(
                'Rejected paste creation: %s',
                error,
                extra={'event': PASTE_VALIDATION_FAILED, 'error_code': error.error_code},
            )
            raise

        paste = PasteModel(
            paste_id=generate_shortcode(self.shortcode_length),
            content=content,
            created_at=created_at,
            ttl_seconds=ttl_seconds,
            max_views=max_views,
        )
        self.dao.set(paste)

        logger.info(
            'Paste created.',
            extra={
                'event': PASTE_CREATED,
                'paste_id': paste.paste_id,
                'ttl_seconds': ttl_seconds,
                'max_views': max_views,
            },
        )
        return paste.paste_id

    @beartype
    def access(self, paste_id: str, *, now: int | None = None) -> PasteView:
        """Serve a paste and consume one view

        Procedure:
        - Step 1: Fetch the record (missing -> not found)
        - Step 2: TTL check (expired -> delete record, not found)
        - Step 3: View-limit check (exhausted -> not found, record kept)
        - Step 4: Conditionally write views + 1; on conflict start over from step 1

        Args:
            paste_id (str):
                The paste id returned by create().
            now (int | None):
                Current time in ms since the epoch. Defaults to the manager clock.

        Returns:
            PasteView:
                content, views left after this one (None if unlimited) and
                ISO-8601 expiry (None if no TTL).

        Raises:
            PasteNotFoundError:
                If the paste is missing, expired or exhausted.
            PasteContentionError:
                If `max_write_retries` is set and the view couldn't be recorded within it.
            CorruptRecordError:
                If the stored expiry can't be rendered as a timestamp. No view is consumed.
            DataStoreError:
                If the record store is unreachable.
        """
        now = self.clock() if now is None else now

        attempts = itertools.count(1) if self.max_write_retries is None else range(1, self.max_write_retries + 1)
        for attempt in attempts:
            # 1- Fetch the record
            paste = self.dao.get(paste_id)
            if paste is None:
                raise self._not_found(paste_id, NotFoundReason.MISSING)

            # 2- Lazy TTL expiry
            if paste.is_expired(now):
                self.dao.delete(paste_id)
                raise self._not_found(paste_id, NotFoundReason.EXPIRED)

            # 3- View limit (exhausted records are kept)
            if paste.is_exhausted:
                raise self._not_found(paste_id, NotFoundReason.EXHAUSTED)

            # 4- Consume one view, unless someone else wrote in between
            viewed = replace(paste, views=paste.views + 1)
            view = self._render(viewed)
            if self.dao.compare_and_set(viewed, expected=paste):
                logger.info(
                    'Paste viewed.',
                    extra={
                        'event': PASTE_VIEWED,
                        'paste_id': paste_id,
                        'views': viewed.views,
                        'remaining_views': viewed.remaining_views,
                    },
                )
                return view

            logger.info(
                'Paste changed while being viewed. Retrying.',
                extra={'event': PASTE_VIEW_CONFLICT, 'paste_id': paste_id, 'attempt': attempt},
            )

        raise PasteContentionError(f"Couldn't record a view of paste '{paste_id}' after {self.max_write_retries} attempts.")

    @staticmethod
    def _render(paste: PasteModel) -> PasteView:
        """PasteView of `paste`, built before the view is committed"""
        expires_at = paste.expires_at_ms
        try:
            rendered = None if expires_at is None else iso_timestamp(expires_at)
        except OverflowError as e:
            raise CorruptRecordError(f"Paste record '{paste.paste_id}' expires outside the supported timestamp range.") from e
        return PasteView(content=paste.content, remaining_views=paste.remaining_views, expires_at=rendered)

    def _not_found(self, paste_id: str, reason: NotFoundReason) -> PasteNotFoundError:
        logger.info(
            'Paste not found.',
            extra={'event': PASTE_NOT_FOUND, 'paste_id': paste_id, 'reason': reason.value},
        )
        return PasteNotFoundError(paste_id, reason=reason)
