from __future__ import annotations

from enum import StrEnum
from typing import Union

from .constants import FIELD_DELIMITER


class Command(StrEnum):
    """
    Leading tokens of every wire line.
    Server->client unless noted; USERNAME and REQUEST_PLAYER_LIST are client->server,
    HEARTBEAT travels both ways.
    """

    REQUEST_USERNAME = "#requestUsername"
    USERNAME = "#Username"
    HEARTBEAT = "#CatGirl"
    NO_VERIFY = "#noVerify"
    PLAYER_LIST = "#playerList"
    REQUEST_PLAYER_LIST = "#requestPlayerList"
    NEW_PLAYER_JOIN = "#newPlayerJoin"
    PLAYER_LEAVE = "#playerLeave"
    CHAT_MESSAGE = "#ChatMessage"


def normalize_command(command: Union[str, Command]) -> str:
    if isinstance(command, Command):
        return command.value
    return str(command)


def build_line(command: Union[str, Command], *fields: str) -> str:
    """Join a command and its fields with the field delimiter (no terminator)."""
    return FIELD_DELIMITER.join([normalize_command(command), *fields])


def username_reply(username: str) -> str:
    # the handshake reply is space separated, unlike every other line
    return f"{Command.USERNAME.value} {username}"


def is_heartbeat(line: str) -> bool:
    """Heartbeat lines are protocol noise and never logged in verbose mode."""
    return Command.HEARTBEAT.value in line


__all__ = ["Command", "normalize_command", "build_line", "username_reply", "is_heartbeat"]
