"""Locate-or-create accumulators inside a transport-owned session store."""

from __future__ import annotations

import threading
from typing import Any, Optional, Protocol

from message_emit.contracts.message import ERROR_ROLE, MESSAGE_ROLE, AccumulatorRole
from message_emit.errors import NoActiveSession
from message_emit.logging_config import get_logger
from message_emit.services.accumulator import EmitObserver, MessageAccumulator

logger = get_logger(__name__)


class Session(Protocol):
    """Attribute bag owned by the transport layer."""
    def get_attribute(self, key: str) -> Any: ...
    def set_attribute(self, key: str, value: Any) -> None: ...


class SessionStore(Protocol):
    """Gives access to the session of the current request."""
    def get_session(self, create_if_absent: bool) -> Optional[Session]: ...


def bind(
    store: SessionStore,
    role: AccumulatorRole,
    interaction_id: str,
    clear: bool,
    observer: Optional[EmitObserver] = None,
    locking: bool = True,
) -> MessageAccumulator:
    """
    Fetch the accumulator stored under role.attr_name, creating it if needed.

    The accumulator is reinitialised for interaction_id and written back so
    the session always holds the canonical instance.

    Args:
        store: Session store of the current request
        role: Which accumulator (session key and kind) to bind
        interaction_id: Label of the current request cycle
        clear: Drop records left over from earlier requests
        observer: Emit observer attached to the accumulator
        locking: Guard list mutation of a newly created accumulator

    Raises:
        NoActiveSession: The store has no session; nothing is written.
    """
    session = store.get_session(create_if_absent=False)
    if session is None:
        raise NoActiveSession()

    existing = session.get_attribute(role.attr_name)
    if isinstance(existing, MessageAccumulator) and existing.role == role:
        accumulator = existing
    else:
        if existing is not None:
            logger.warning(
                "session_attribute_replaced",
                attr_name=role.attr_name,
                found_type=type(existing).__name__,
            )
        accumulator = MessageAccumulator(role, observer=observer, locking=locking)
        logger.debug(
            "accumulator_created",
            attr_name=role.attr_name,
            interaction_id=interaction_id,
        )

    if observer is not None:
        accumulator.observer = observer

    accumulator.reinit(interaction_id, clear)
    session.set_attribute(role.attr_name, accumulator)
    return accumulator


def bind_errors(
    store: SessionStore,
    interaction_id: str,
    clear: bool,
    observer: Optional[EmitObserver] = None,
    locking: bool = True,
) -> MessageAccumulator:
    """Bind the error accumulator of the current session."""
    return bind(store, ERROR_ROLE, interaction_id, clear, observer=observer, locking=locking)


def bind_messages(
    store: SessionStore,
    interaction_id: str,
    clear: bool,
    observer: Optional[EmitObserver] = None,
    locking: bool = True,
) -> MessageAccumulator:
    """Bind the informational accumulator of the current session."""
    return bind(store, MESSAGE_ROLE, interaction_id, clear, observer=observer, locking=locking)


class InMemorySession:
    """Dict-backed session."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        self._attributes: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get_attribute(self, key: str) -> Any:
        with self._lock:
            return self._attributes.get(key)

    def set_attribute(self, key: str, value: Any) -> None:
        with self._lock:
            self._attributes[key] = value


class InMemorySessionStore:
    """
    In-memory session store holding at most one current session.

    Stands in for the transport layer: get_session(True) creates
    the session, get_session(False) never does.
    """

    def __init__(self, session_id: str = "session-1") -> None:
        self._session_id = session_id
        self._session: Optional[InMemorySession] = None
        self._lock = threading.Lock()

    def get_session(self, create_if_absent: bool) -> Optional[InMemorySession]:
        with self._lock:
            if self._session is None and create_if_absent:
                self._session = InMemorySession(self._session_id)
            return self._session

    def invalidate(self) -> None:
        """Drop the current session and every attribute it held."""
        with self._lock:
            self._session = None

    @property
    def has_session(self) -> bool:
        with self._lock:
            return self._session is not None
