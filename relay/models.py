"""Pydantic models for Linear webhook payloads and relay messages.

Linear webhook bodies carry the changed entity under `data`, with `type`
naming the entity kind:

    {"action": "create", "type": "Comment", "data": {...}, "createdAt": "...", "url": "..."}

The envelope folds `type` + `data` into a single `event` field so that the
entity kind and its fields travel together as one tagged union.
"""
import enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, model_validator


class ActionKind(str, enum.Enum):
    CREATE = "create"
    UPDATE = "update"
    REMOVE = "remove"

    @classmethod
    def _missing_(cls, value: object) -> "ActionKind | None":
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


class CommentEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: Literal["Comment"] = "Comment"
    id: str
    body: str
    user_id: str = Field(alias="userId")
    issue_id: str = Field(alias="issueId")


class UnsupportedEvent(BaseModel):
    """Marker for entity kinds the relay does not handle (Issue, Reaction, ...)."""

    model_config = ConfigDict(extra="ignore")

    type: str | None = None


def _event_tag(value: Any) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return "Comment" if kind == "Comment" else "unsupported"


EventData = Annotated[
    Union[
        Annotated[CommentEvent, Tag("Comment")],
        Annotated[UnsupportedEvent, Tag("unsupported")],
    ],
    Discriminator(_event_tag),
]


class WebhookPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    action: ActionKind
    created_at: str = Field(alias="createdAt")
    url: str | None = None
    event: EventData

    @model_validator(mode="before")
    @classmethod
    def fold_event(cls, data: Any) -> Any:
        """Merge the wire `type` discriminator into the `data` object."""
        if not isinstance(data, dict) or not ("type" in data or "data" in data):
            return data
        data = dict(data)
        kind = data.pop("type", None)
        entity = data.pop("data", None)
        if isinstance(entity, dict):
            data["event"] = {**entity, "type": kind}
        else:
            data["event"] = {"type": kind}
        return data


class CommentMeta(BaseModel):
    """Comment context fetched from the Linear API."""

    author_display_name: str
    issue_title: str
    issue_identifier: str


class OutboundNotification(BaseModel):
    """Body of a Discord incoming-webhook message."""

    content: str
    username: str
