"""
Error taxonomy shared by the repositories, services and HTTP layer.

Repositories raise RepositoryError subclasses. Services translate them into
ServiceError subclasses, whose status_code the exception handlers in
app.main render as {"Error": <message>}.
"""

from fastapi import status

# ---------------------------------------------------------------------------
# Repository errors
# ---------------------------------------------------------------------------


class RepositoryError(Exception):
    """Base class for storage failures."""


class RecordNotFoundError(RepositoryError):
    """A single record looked up by identity does not exist."""

    def __init__(self, kind: str, id: object) -> None:
        self.kind = kind
        self.id = str(id)
        super().__init__(f"{kind} with id {self.id} not found")


class EntityNotFoundError(RepositoryError):
    def __init__(self, message: str = "entity not found") -> None:
        super().__init__(message)


class InvalidDataError(RepositoryError):
    def __init__(self, message: str = "unsupported data") -> None:
        super().__init__(message)


class DuplicateRecordError(RepositoryError):
    """The store's uniqueness constraint rejected the write."""


def is_not_found(exc: BaseException) -> bool:
    return isinstance(exc, RecordNotFoundError)


# ---------------------------------------------------------------------------
# Service errors
# ---------------------------------------------------------------------------


class ServiceError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnprocessableEntityError(ServiceError):
    """Bad input, a missing referenced entity, or a rejected domain rule."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ServiceError):
    def __init__(self, message: str = "Unknown error") -> None:
        super().__init__(message)
