"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    DataStoreError:
        Raised when the data store fails (e.g., connection issues, timeouts, OOM, etc.).

    CorruptRecordError:
        Raised when a stored paste record can't be decoded.

Example:
    >>> from cloudpaste.dao.exceptions import DataStoreError
    >>> raise DataStoreError("Can't connect to Redis at localhost:6379/0.")
    Traceback (most recent call last):
        ...
    cloudpaste.dao.exceptions.DataStoreError: Can't connect to Redis at localhost:6379/0.
"""

from cloudpaste.exceptions import CloudPasteError


class DAOError(CloudPasteError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include connection issues, timeouts, and out-of-memory failures.
    """

    error_code = 'dao:data_store_error'


class CorruptRecordError(DAOError):
    """Raised when a stored paste record doesn't match the expected shape."""

    error_code = 'dao:corrupt_record_error'
