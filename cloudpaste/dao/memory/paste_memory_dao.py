"""In-process paste store for local development and tests.

Records live in a dict guarded by a single lock, so compare_and_set() is atomic
across threads of one process. Nothing is shared between processes or persisted.

Example:
    >>> dao = PasteMemoryDAO()
    >>> dao.set(PasteModel(paste_id='abc', content='hi', created_at=0))
    <PasteMemoryDAO>
    >>> dao.get('abc').content
    'hi'
    >>> dao.delete('abc'), dao.delete('abc')
    (True, False)
"""

import threading

from beartype import beartype

from cloudpaste.models import PasteModel
from cloudpaste.dao.base import PasteBaseDAO


class PasteMemoryDAO(PasteBaseDAO):
    """Dict-backed Data Access Object (DAO) for paste records

    compare_and_set() checks and writes under one lock, so racing threads see the
    same single-winner behavior as the Redis store. Records are stored as given and
    are lost when the process exits.

    Attributes:
        _pastes (dict[str, PasteModel]):
            Records by paste id. Seeded with a copy of `pastes`, if given.
        _lock (threading.Lock):
            Guards every read and write of `_pastes`.

    len(dao) and `paste_id in dao` report the stored records, for tests.
    """

    def __init__(self, pastes: dict[str, PasteModel] | None = None):
        self._pastes: dict[str, PasteModel] = dict(pastes or {})
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._pastes)

    def __contains__(self, paste_id: str) -> bool:
        with self._lock:
            return paste_id in self._pastes

    @beartype
    def get(self, paste_id: str, **kwargs) -> PasteModel | None:
        with self._lock:
            return self._pastes.get(paste_id)

    @beartype
    def set(self, paste: PasteModel, **kwargs) -> 'PasteMemoryDAO':
        with self._lock:
            self._pastes[paste.paste_id] = paste
        return self

    @beartype
    def compare_and_set(self, paste: PasteModel, expected: PasteModel, **kwargs) -> bool:
        if paste.paste_id != expected.paste_id:
            raise ValueError(f"Can't compare paste '{paste.paste_id}' against paste '{expected.paste_id}'.")

        with self._lock:
            if self._pastes.get(paste.paste_id) != expected:
                return False
            self._pastes[paste.paste_id] = paste
            return True

    @beartype
    def delete(self, paste_id: str, **kwargs) -> bool:
        with self._lock:
            return self._pastes.pop(paste_id, None) is not None

    def ping(self, **kwargs) -> bool:
        return True
