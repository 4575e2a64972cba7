"""Uniform success/error envelope returned by every gateway call."""

from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, model_validator

T = TypeVar("T")


class ErrorKind(str, Enum):
    TIMEOUT = "timeout"
    REMOTE_HTTP_ERROR = "remote_http_error"
    NOT_FOUND = "not_found"
    NETWORK_ERROR = "network_error"
    INVALID_RESPONSE = "invalid_response"


class OperationError(BaseModel):
    kind: ErrorKind
    message: str
    status_code: Optional[int] = None
    details: Optional[Dict[str, Any]] = None


class OperationFailed(Exception):
    def __init__(self, error: OperationError):
        super().__init__(error.message)
        self.error = error


class OperationResult(BaseModel, Generic[T]):
    """Either ``success=True`` with ``value`` or ``success=False`` with ``error``.

    Check ``success`` before touching ``value`` or ``error``.
    """

    success: bool
    value: Optional[T] = None
    error: Optional[OperationError] = None

    @model_validator(mode="after")
    def _one_side_populated(self) -> "OperationResult[T]":
        if self.success:
            if self.error is not None or self.value is None:
                raise ValueError("successful result must carry a value and no error")
        elif self.error is None or self.value is not None:
            raise ValueError("failed result must carry an error and no value")
        return self

    @classmethod
    def ok(cls, value: T) -> "OperationResult[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(
        cls,
        kind: ErrorKind,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> "OperationResult[T]":
        return cls(
            success=False,
            error=OperationError(
                kind=kind, message=message, status_code=status_code, details=details
            ),
        )

    @classmethod
    def from_error(cls, error: OperationError) -> "OperationResult[T]":
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        if not self.success:
            raise OperationFailed(self.error)
        return self.value
