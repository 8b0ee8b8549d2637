"""Outcome contract handed from the request boundary to the renderer."""

from typing import Any

from pydantic import BaseModel, Field

from message_emit.contracts.message import MessageRecord


class RequestOutcome(BaseModel):
    """What one request produced: a status plus drained messages."""

    interaction_id: str
    status_code: int = 200
    errors: list[MessageRecord] = Field(default_factory=list)
    messages: list[MessageRecord] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_messages(self) -> bool:
        return bool(self.messages)

    def to_dict(self) -> dict[str, Any]:
        return {
            "interaction_id": self.interaction_id,
            "status_code": self.status_code,
            "errors": [r.to_dict() for r in self.errors],
            "messages": [r.to_dict() for r in self.messages],
        }
