"""Contracts package - export key models."""

from message_emit.contracts.message import (
    CONNECTOR_NOT_STARTED,
    ERROR_ROLE,
    EXCEPTION_MSG_ID,
    MESSAGE_ROLE,
    NO_MESSAGE_PLACEHOLDER,
    SYNCH_NAMESPACE,
    UNKNOWN_CALENDAR_ITEM_TYPE,
    AccumulatorRole,
    EmitEvent,
    ErrorTag,
    MessageRecord,
)
from message_emit.contracts.outcome import RequestOutcome

__all__ = [
    "AccumulatorRole",
    "EmitEvent",
    "CONNECTOR_NOT_STARTED",
    "ERROR_ROLE",
    "EXCEPTION_MSG_ID",
    "ErrorTag",
    "MESSAGE_ROLE",
    "MessageRecord",
    "NO_MESSAGE_PLACEHOLDER",
    "RequestOutcome",
    "SYNCH_NAMESPACE",
    "UNKNOWN_CALENDAR_ITEM_TYPE",
]
