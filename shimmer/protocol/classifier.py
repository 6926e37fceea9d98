"""
Inbound line classification.

Lines are matched by splitting on the field delimiter and checking the leading
command token plus field count. Handshake literals are compared first, by exact
equality, before any field-based form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .commands import Command, username_reply
from .constants import FIELD_DELIMITER
from .events import (
    BaseEvent,
    ChatMessageEvent,
    PlayerJoinEvent,
    PlayerLeaveEvent,
    PlayerListEvent,
    VerificationRequiredEvent,
    VerifiedEvent,
)


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one line: an optional reply to send and the events to emit."""

    reply: Optional[str] = None
    events: Tuple[BaseEvent, ...] = ()

    @property
    def matched(self) -> bool:
        return self.reply is not None or bool(self.events)


UNMATCHED = Classification()


def classify_line(line: str, username: str) -> Classification:
    text = line.strip()

    if text == Command.REQUEST_USERNAME:
        return Classification(reply=username_reply(username))
    if text == Command.HEARTBEAT:
        return Classification(reply=Command.HEARTBEAT.value)
    if text == Command.NO_VERIFY:
        return Classification(events=(VerificationRequiredEvent(),))

    command, *fields = text.split(FIELD_DELIMITER)

    if command == Command.PLAYER_LIST:
        return Classification(events=(PlayerListEvent(names=fields),))

    if command == Command.NEW_PLAYER_JOIN and fields and fields[0]:
        name = fields[0]
        if name == username:
            # seeing our own join means the server accepted the identity
            return Classification(events=(VerifiedEvent(), PlayerJoinEvent(name=name)))
        return Classification(events=(PlayerJoinEvent(name=name),))

    if command == Command.PLAYER_LEAVE and fields and fields[0]:
        return Classification(events=(PlayerLeaveEvent(name=fields[0]),))

    if command == Command.CHAT_MESSAGE and len(fields) >= 2 and fields[0] and fields[1]:
        return Classification(events=(ChatMessageEvent(player=fields[0], text=fields[1]),))

    return UNMATCHED


__all__ = ["Classification", "UNMATCHED", "classify_line"]
