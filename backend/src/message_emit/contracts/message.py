"""Message contracts shared by accumulators, the boundary and renderers."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


EXCEPTION_MSG_ID = "org.bedework.web.error.exc"
NO_MESSAGE_PLACEHOLDER = "<No-message>"

# Message ids raised by the synch connectors
CONNECTOR_NOT_STARTED = "org.bedework.synch.error.connectorNotStarted"

SYNCH_NAMESPACE = "http://www.bedework.org/synch/wsmessages"


class MessageRecord(BaseModel):
    """One emitted diagnostic: a message id plus its positional parameters."""

    model_config = ConfigDict(frozen=True)

    msg_id: str = Field(min_length=1)
    params: tuple[Any, ...] = ()

    @classmethod
    def of(cls, msg_id: str, *params: Any) -> "MessageRecord":
        """Build a record, dropping None parameters instead of keeping placeholders."""
        return cls(msg_id=msg_id, params=tuple(p for p in params if p is not None))

    def to_dict(self) -> dict[str, Any]:
        return {"msg_id": self.msg_id, "params": list(self.params)}


class ErrorTag(BaseModel):
    """Namespace-qualified machine-readable error discriminator."""

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    local_name: str = Field(min_length=1)

    def __str__(self) -> str:
        if not self.namespace:
            return self.local_name
        return f"{{{self.namespace}}}{self.local_name}"


UNKNOWN_CALENDAR_ITEM_TYPE = ErrorTag(
    namespace=SYNCH_NAMESPACE,
    local_name="unknown-calendar-item-type",
)


class AccumulatorRole(BaseModel):
    """Session key and semantic role an accumulator is bound under."""

    model_config = ConfigDict(frozen=True)

    attr_name: str = Field(min_length=1)
    kind: Literal["error", "message"]


ERROR_ROLE = AccumulatorRole(attr_name="org.bedework.web.errorobj", kind="error")
MESSAGE_ROLE = AccumulatorRole(attr_name="org.bedework.web.messageobj", kind="message")


class EmitEvent(BaseModel):
    """Description of one committed append, handed to emit observers."""

    model_config = ConfigDict(frozen=True)

    role: AccumulatorRole
    interaction_id: str | None = None
    record: MessageRecord
    param_type: str | None = None
    rendered: str | None = None
