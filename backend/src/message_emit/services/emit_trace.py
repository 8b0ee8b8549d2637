"""Debug trace of every emitted message, written to the log sink."""

from __future__ import annotations

from typing import Any, Optional

from message_emit.contracts.message import EmitEvent
from message_emit.logging_config import get_logger


class EmitTraceObserver:
    """
    Emit observer that writes one debug entry per appended record.

    The entry carries the message id, a label for the parameter types
    and the stringified parameter values as they were supplied.
    """

    def __init__(self, logger: Optional[Any] = None) -> None:
        self._logger = logger if logger is not None else get_logger(__name__)

    def __call__(self, event: EmitEvent) -> None:
        self._logger.debug(
            "message_emitted",
            property=event.record.msg_id,
            ptype=event.param_type,
            values=event.rendered,
            role=event.role.kind,
            interaction_id=event.interaction_id,
        )
