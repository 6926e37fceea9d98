from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import ShimmerError


class EventKind(StrEnum):
    """Closed set of events an adapter can emit."""

    PLAYER_LIST = "playerList"
    PLAYER_JOIN = "playerJoin"
    PLAYER_LEAVE = "playerLeave"
    CHAT_MESSAGE = "message"
    VERIFICATION_REQUIRED = "noVerify"
    VERIFIED = "verified"
    STREAM_CLOSED = "close"
    STREAM_ERROR = "error"
    STOPPED = "stop"


def normalize_kind(kind: Union[str, EventKind]) -> EventKind:
    """Map a kind name (``"playerList"``, ``"PLAYER_LIST"``) onto the enum; unknown names raise ValueError."""
    if isinstance(kind, EventKind):
        return kind
    try:
        return EventKind(kind)
    except ValueError:
        try:
            return EventKind[str(kind).upper()]
        except KeyError:
            raise ValueError(f"Unknown event kind: {kind!r}") from None


class BaseEvent(BaseModel):
    """Base shared by every event. Events are immutable and never stored by the adapter."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: EventKind


class PlayerListEvent(BaseEvent):
    kind: Literal[EventKind.PLAYER_LIST] = EventKind.PLAYER_LIST
    names: list[str] = Field(default_factory=list, description="Player names in server order")


class PlayerJoinEvent(BaseEvent):
    kind: Literal[EventKind.PLAYER_JOIN] = EventKind.PLAYER_JOIN
    name: str


class PlayerLeaveEvent(BaseEvent):
    kind: Literal[EventKind.PLAYER_LEAVE] = EventKind.PLAYER_LEAVE
    name: str


class ChatMessageEvent(BaseEvent):
    kind: Literal[EventKind.CHAT_MESSAGE] = EventKind.CHAT_MESSAGE
    player: str
    text: str


class VerificationRequiredEvent(BaseEvent):
    kind: Literal[EventKind.VERIFICATION_REQUIRED] = EventKind.VERIFICATION_REQUIRED


class VerifiedEvent(BaseEvent):
    kind: Literal[EventKind.VERIFIED] = EventKind.VERIFIED


class StreamClosedEvent(BaseEvent):
    kind: Literal[EventKind.STREAM_CLOSED] = EventKind.STREAM_CLOSED


class StreamErrorEvent(BaseEvent):
    kind: Literal[EventKind.STREAM_ERROR] = EventKind.STREAM_ERROR
    error: ShimmerError

    @property
    def cause(self) -> BaseException:
        """The underlying exception when there is one, else the adapter error itself."""
        return self.error.__cause__ or self.error


class StoppedEvent(BaseEvent):
    kind: Literal[EventKind.STOPPED] = EventKind.STOPPED


Event = Annotated[
    Union[
        PlayerListEvent,
        PlayerJoinEvent,
        PlayerLeaveEvent,
        ChatMessageEvent,
        VerificationRequiredEvent,
        VerifiedEvent,
        StreamClosedEvent,
        StreamErrorEvent,
        StoppedEvent,
    ],
    Field(discriminator="kind"),
]


__all__ = [
    "EventKind",
    "normalize_kind",
    "BaseEvent",
    "PlayerListEvent",
    "PlayerJoinEvent",
    "PlayerLeaveEvent",
    "ChatMessageEvent",
    "VerificationRequiredEvent",
    "VerifiedEvent",
    "StreamClosedEvent",
    "StreamErrorEvent",
    "StoppedEvent",
    "Event",
]
