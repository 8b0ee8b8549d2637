"""Session-scoped accumulator of error and informational messages."""

from __future__ import annotations

import contextlib
import threading
from typing import Any, Callable, ContextManager, Optional

from message_emit.contracts.message import (
    EXCEPTION_MSG_ID,
    NO_MESSAGE_PLACEHOLDER,
    AccumulatorRole,
    EmitEvent,
    MessageRecord,
)
from message_emit.errors import ErrorCondition, MessageEmitError
from message_emit.logging_config import get_logger

logger = get_logger(__name__)


# Type alias for emit callback
EmitObserver = Callable[[EmitEvent], None]


def describe_params(params: tuple[Any, ...]) -> tuple[Optional[str], Optional[str]]:
    """Return the (type label, rendered values) pair for a raw parameter tuple."""
    if not params:
        return None, None
    if len(params) == 1:
        value = params[0]
        if value is None:
            return "null object", "null"
        return type(value).__name__, str(value)
    return f"{len(params)}objects", "; ".join(str(p) for p in params)


def error_text(exc: BaseException) -> Optional[str]:
    """Human message carried by an exception, or None when it has none."""
    if isinstance(exc, MessageEmitError):
        return exc.message
    if not exc.args:
        return None
    return str(exc)


class MessageAccumulator:
    """
    Ordered collection of MessageRecords bound to one session.

    The same instance is reused across the requests of a session;
    reinit() marks the start of each request. An optional observer
    is called after every append has been committed.
    """

    def __init__(
        self,
        role: AccumulatorRole,
        observer: Optional[EmitObserver] = None,
        locking: bool = True,
    ) -> None:
        self.role = role
        self.interaction_id: Optional[str] = None
        self._records: list[MessageRecord] = []
        self._observer = observer
        self._locking = locking
        self._lock: Optional[threading.Lock] = threading.Lock() if locking else None

    def __getstate__(self) -> dict[str, Any]:
        # Locks and observers do not survive serialization by the session store
        state = self.__dict__.copy()
        state["_lock"] = None
        state["_observer"] = None
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._lock = threading.Lock() if self._locking else None

    def _guard(self) -> ContextManager[Any]:
        if self._lock is None:
            return contextlib.nullcontext()
        return self._lock

    @property
    def observer(self) -> Optional[EmitObserver]:
        return self._observer

    @observer.setter
    def observer(self, value: Optional[EmitObserver]) -> None:
        self._observer = value

    def reinit(self, interaction_id: str, clear: bool) -> None:
        """Start a new interaction; drop earlier records only when clear is set."""
        with self._guard():
            self.interaction_id = interaction_id
            if clear:
                self._records.clear()

    def append(self, msg_id: str, *params: Any) -> MessageRecord:
        """Record msg_id with its parameters. None parameters are dropped."""
        record = MessageRecord.of(msg_id, *params)
        param_type, rendered = describe_params(params)
        self._commit(record, param_type, rendered)
        return record

    def append_int(self, msg_id: str, num: int) -> MessageRecord:
        """Record msg_id with a single integer parameter."""
        record = MessageRecord.of(msg_id, int(num))
        self._commit(record, "int", str(num))
        return record

    def append_from_error(self, exc: BaseException) -> MessageRecord:
        """
        Convert an exception into one message record.

        The exception is logged at error level with its message (or the
        placeholder when it has none) and recorded under EXCEPTION_MSG_ID.
        """
        text = error_text(exc)
        if text is None:
            text = NO_MESSAGE_PLACEHOLDER

        log_fields: dict[str, Any] = {
            "role": self.role.kind,
            "interaction_id": self.interaction_id,
            "error_type": type(exc).__name__,
        }
        if isinstance(exc, ErrorCondition):
            log_fields["status_code"] = exc.status_code
            if exc.error_tag is not None:
                log_fields["error_tag"] = str(exc.error_tag)
        logger.error(text, exc_info=exc, **log_fields)

        record = MessageRecord.of(EXCEPTION_MSG_ID, text)
        self._commit(record, type(exc).__name__, text)
        return record

    def set_exception_msg_id(self, msg_id: str) -> None:
        """The exception message id is fixed for web accumulators."""
        raise ErrorCondition("Unsupported: set_exception_msg_id")

    def clear_all(self) -> None:
        """Drop every record regardless of the interaction."""
        with self._guard():
            self._records.clear()

    def messages_emitted(self) -> bool:
        return bool(self._records)

    def get_records(self) -> list[MessageRecord]:
        """Return the live record list (not a snapshot)."""
        return self._records

    @property
    def records(self) -> list[MessageRecord]:
        return self._records

    @property
    def count(self) -> int:
        """Number of records currently held."""
        return len(self._records)

    def _commit(
        self,
        record: MessageRecord,
        param_type: Optional[str],
        rendered: Optional[str],
    ) -> None:
        with self._guard():
            self._records.append(record)
            interaction_id = self.interaction_id
        if self._observer is None:
            return
        try:
            self._observer(
                EmitEvent(
                    role=self.role,
                    interaction_id=interaction_id,
                    record=record,
                    param_type=param_type,
                    rendered=rendered,
                )
            )
        except Exception as e:
            logger.warning(
                "emit_observer_failed",
                msg_id=record.msg_id,
                error_type=type(e).__name__,
                exc_info=e,
            )

    def __repr__(self) -> str:
        return (
            f"MessageAccumulator(kind={self.role.kind!r}, "
            f"interaction_id={self.interaction_id!r}, records={len(self._records)})"
        )
