"""Services package - export accumulator and session helpers."""

from message_emit.services.accumulator import EmitObserver, MessageAccumulator
from message_emit.services.emit_trace import EmitTraceObserver
from message_emit.services.session import (
    InMemorySession,
    InMemorySessionStore,
    Session,
    SessionStore,
    bind,
    bind_errors,
    bind_messages,
)

__all__ = [
    "EmitObserver",
    "EmitTraceObserver",
    "InMemorySession",
    "InMemorySessionStore",
    "MessageAccumulator",
    "Session",
    "SessionStore",
    "bind",
    "bind_errors",
    "bind_messages",
]
