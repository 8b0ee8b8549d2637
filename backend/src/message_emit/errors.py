"""
Error taxonomy for request message emission.

Defines the exceptions raised by business logic and by the session binding
layer. Conditions raised deep in a call chain carry the HTTP status the
request boundary should answer with, so the boundary never has to guess.

Each error class implements:
- code: String identifier for the error type
- message: Human-readable description (may be None for conditions)
- context: Dict containing additional contextual information
"""
from __future__ import annotations

from enum import Enum
from http import HTTPStatus
from typing import Any, Optional

from message_emit.contracts.message import ErrorTag


class MessageEmitError(Exception):
    """Base exception for all message_emit errors."""

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        code: str = "UNKNOWN_ERROR",
        context: dict[str, Any] | None = None,
    ) -> None:
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context) if context else {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to structured dict."""
        return {
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
        }


class NoActiveSession(MessageEmitError):
    """The transport reported no session; fatal for the current request."""

    def __init__(self) -> None:
        super().__init__("No HTTP session", code="NO_ACTIVE_SESSION")


class StatusClass(Enum):
    """Variants of ErrorCondition and the status each one resolves to."""

    INTERNAL_ERROR = "internal_error"
    BAD_REQUEST = "bad_request"
    GATEWAY_TIMEOUT = "gateway_timeout"

    @property
    def default_status(self) -> int:
        return int(DEFAULT_STATUS[self])


DEFAULT_STATUS: dict[StatusClass, HTTPStatus] = {
    StatusClass.INTERNAL_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
    StatusClass.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    StatusClass.GATEWAY_TIMEOUT: HTTPStatus.GATEWAY_TIMEOUT,
}


class ErrorCondition(MessageEmitError):
    """
    A failure carrying a transport status, an optional structured tag,
    an optional message and an optional wrapped cause.

    The status is resolved during construction: an explicit ``status_code``
    wins, otherwise the variant's default from DEFAULT_STATUS applies.
    """

    variant: StatusClass = StatusClass.INTERNAL_ERROR

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        error_tag: Optional[ErrorTag] = None,
        cause: Optional[BaseException] = None,
        code: Optional[str] = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code or self.variant.name,
            context=context,
        )
        self._status_code = (
            status_code if status_code is not None else self.variant.default_status
        )
        self._error_tag = error_tag
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorCondition":
        """Wrap an arbitrary exception as an internal-error condition."""
        message = str(exc) if exc.args else None
        return cls(message, cause=exc)

    @property
    def status_code(self) -> int:
        return self._status_code

    @status_code.setter
    def status_code(self, value: int) -> None:
        self._status_code = value

    def set_status_code(self, value: int) -> None:
        """Override the status resolved at construction."""
        self._status_code = value

    @property
    def error_tag(self) -> Optional[ErrorTag]:
        return self._error_tag

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["status_code"] = self._status_code
        result["error_tag"] = str(self._error_tag) if self._error_tag else None
        return result

    def __str__(self) -> str:
        return self.message or self.code


class BadRequest(ErrorCondition):
    """Client input was rejected."""

    variant = StatusClass.BAD_REQUEST


class Timeout(ErrorCondition):
    """An upstream system did not answer in time."""

    variant = StatusClass.GATEWAY_TIMEOUT
