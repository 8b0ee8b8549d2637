"""Request boundary: binds the session accumulators and converts errors."""

from __future__ import annotations

from http import HTTPStatus
from types import TracebackType
from typing import Callable, Optional

from message_emit.contracts.outcome import RequestOutcome
from message_emit.errors import ErrorCondition, NoActiveSession
from message_emit.logging_config import clear_interaction_id, get_logger, set_interaction_id
from message_emit.services.accumulator import EmitObserver, MessageAccumulator
from message_emit.services.session import SessionStore, bind_errors, bind_messages

logger = get_logger(__name__)

RequestHandler = Callable[[MessageAccumulator, MessageAccumulator], None]


class RequestBoundary:
    """
    Context manager wrapping the handling of one request.

    On entry the error and informational accumulators of the session are
    bound for interaction_id. An ErrorCondition escaping the block is
    recorded through append_from_error and selects the response status;
    any other Exception is treated as an internal error the same way.
    NoActiveSession and non-Exception BaseExceptions propagate.
    """

    def __init__(
        self,
        store: SessionStore,
        interaction_id: str,
        clear: bool = True,
        observer: Optional[EmitObserver] = None,
        locking: bool = True,
    ) -> None:
        self.store = store
        self.interaction_id = interaction_id
        self.clear = clear
        self.observer = observer
        self.locking = locking
        self.status_code = int(HTTPStatus.OK)
        self.error: Optional[ErrorCondition] = None
        self._errors: Optional[MessageAccumulator] = None
        self._messages: Optional[MessageAccumulator] = None

    @property
    def errors(self) -> MessageAccumulator:
        if self._errors is None:
            raise RuntimeError("RequestBoundary used outside its with-block")
        return self._errors

    @property
    def messages(self) -> MessageAccumulator:
        if self._messages is None:
            raise RuntimeError("RequestBoundary used outside its with-block")
        return self._messages

    def __enter__(self) -> "RequestBoundary":
        set_interaction_id(self.interaction_id)
        try:
            self._errors = bind_errors(
                self.store,
                self.interaction_id,
                self.clear,
                observer=self.observer,
                locking=self.locking,
            )
            self._messages = bind_messages(
                self.store,
                self.interaction_id,
                self.clear,
                observer=self.observer,
                locking=self.locking,
            )
        except NoActiveSession:
            clear_interaction_id()
            raise
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> bool:
        try:
            if exc is None:
                return False
            if isinstance(exc, NoActiveSession) or not isinstance(exc, Exception):
                return False

            if isinstance(exc, ErrorCondition):
                condition = exc
            else:
                condition = ErrorCondition.from_exception(exc)

            self.errors.append_from_error(exc)
            self.error = condition
            self.status_code = condition.status_code
            logger.info(
                "request_error_converted",
                status_code=self.status_code,
                error_type=type(exc).__name__,
            )
            return True
        finally:
            clear_interaction_id()

    def outcome(self) -> RequestOutcome:
        """Snapshot the status and both record lists for the renderer."""
        return RequestOutcome(
            interaction_id=self.interaction_id,
            status_code=self.status_code,
            errors=list(self.errors.get_records()),
            messages=list(self.messages.get_records()),
        )


def handle_request(
    store: SessionStore,
    interaction_id: str,
    handler: RequestHandler,
    clear: bool = True,
    observer: Optional[EmitObserver] = None,
    locking: bool = True,
) -> RequestOutcome:
    """
    Run handler(errors, messages) inside a RequestBoundary.

    The handler receives both accumulators explicitly and appends to them
    or raises an ErrorCondition; the outcome carries whatever was recorded.
    """
    boundary = RequestBoundary(
        store,
        interaction_id,
        clear=clear,
        observer=observer,
        locking=locking,
    )
    with boundary:
        handler(boundary.errors, boundary.messages)
    return boundary.outcome()
