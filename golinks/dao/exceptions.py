"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    LinkNotFoundError:
        Raised when no Link is registered under a canonical short name.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

    DataStoreInitError:
        Raised when the data store can't be opened (unreachable, bad credentials, etc.).

Example:
    >>> from golinks.dao.exceptions import LinkNotFoundError
    >>> raise LinkNotFoundError("Link 'foo' not found.")
    Traceback (most recent call last):
        ...
    golinks.dao.exceptions.LinkNotFoundError: Link 'foo' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class LinkNotFoundError(DAOError):
    """Exception raised when a Link is not found in the data store."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, aborted transactions, etc.
    """

    pass


class DataStoreInitError(DataStoreError):
    """Exception raised when the data store can't be opened."""

    pass
