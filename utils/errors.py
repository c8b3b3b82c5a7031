"""
Errors Module - Exception types raised by the contact pipeline
"""


class ContactServiceError(Exception):
    """Base class for contact service failures"""


class StorageError(ContactServiceError):
    """The contact store could not retain or read records.

    The message is meant for operator logs only; handlers replace it with a
    generic response before anything reaches the caller.
    """


class NotFoundError(ContactServiceError):
    """A requested static resource does not exist"""


__all__ = ['ContactServiceError', 'StorageError', 'NotFoundError']
