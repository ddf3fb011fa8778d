"""
Error taxonomy shared by the Section Store and the block layer.

Validation errors (NotFound, InvalidArgument, InvalidFormat, Conflict) are
raised before any write and are never worth retrying. StorageError wraps a
backend failure; callers may retry the original request when `retryable` is set.
"""
from sqlalchemy.exc import DBAPIError, OperationalError, TimeoutError as PoolTimeoutError


class SectionError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(SectionError):
    """Missing, or not owned by the caller. The two are indistinguishable."""
    status_code = 404


class InvalidArgument(SectionError):
    status_code = 400


class InvalidFormat(SectionError):
    status_code = 400


class Conflict(SectionError):
    status_code = 409


class StorageError(SectionError):
    status_code = 503

    def __init__(self, message: str, *, retryable: bool = False):
        super().__init__(message)
        self.retryable = retryable

    @classmethod
    def from_exception(cls, exc: Exception) -> "StorageError":
        retryable = isinstance(exc, (OperationalError, PoolTimeoutError)) or (
            isinstance(exc, DBAPIError) and exc.connection_invalidated
        )
        return cls(f"Storage failure: {exc.__class__.__name__}", retryable=retryable)
