"""Dependency injection helpers."""

from __future__ import annotations

from typing import Optional

from message_emit.boundary import RequestBoundary
from message_emit.config import Settings, get_settings
from message_emit.contracts.message import AccumulatorRole
from message_emit.services.accumulator import EmitObserver, MessageAccumulator
from message_emit.services.emit_trace import EmitTraceObserver
from message_emit.services.session import SessionStore


def get_emit_observer(settings: Optional[Settings] = None) -> Optional[EmitObserver]:
    """Trace observer when emit tracing is enabled, otherwise None."""
    _settings = settings or get_settings()
    if not _settings.emit_trace:
        return None
    return EmitTraceObserver()


def create_accumulator(
    role: AccumulatorRole,
    settings: Optional[Settings] = None,
) -> MessageAccumulator:
    """Create a standalone accumulator configured from settings."""
    _settings = settings or get_settings()
    return MessageAccumulator(
        role,
        observer=get_emit_observer(_settings),
        locking=_settings.lock_accumulators,
    )


def create_request_boundary(
    store: SessionStore,
    interaction_id: str,
    clear: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> RequestBoundary:
    """Create a RequestBoundary configured from settings."""
    _settings = settings or get_settings()
    return RequestBoundary(
        store,
        interaction_id,
        clear=_settings.clear_on_bind if clear is None else clear,
        observer=get_emit_observer(_settings),
        locking=_settings.lock_accumulators,
    )
