from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    VALIDATION_FAILED = "validation_failed"
    PRECONDITION_FAILED = "precondition_failed"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    WRITE_FAILED = "write_failed"


class DomainError(Exception):
    """Base class for every failure a use case reports to its caller.

    ``details`` holds extra machine-readable fields (ids, violations) that the
    HTTP adapter merges into the error payload next to ``kind`` and ``message``.
    """

    kind: ErrorKind

    def __init__(self, message: str, **details: Any):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message, **self.details}


class ValidationFailedError(DomainError):
    kind = ErrorKind.VALIDATION_FAILED

    def __init__(self, violations: list[str]):
        self.violations = violations
        super().__init__(violations[0], violations=violations)


class PreconditionFailedError(DomainError):
    kind = ErrorKind.PRECONDITION_FAILED


class ConflictError(DomainError):
    kind = ErrorKind.CONFLICT


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND


class WriteFailedError(DomainError):
    kind = ErrorKind.WRITE_FAILED
