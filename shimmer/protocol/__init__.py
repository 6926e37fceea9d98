"""
Shimmer line protocol: wire commands, framing helpers, typed events and the
inbound line classifier.
"""

from .classifier import UNMATCHED, Classification, classify_line
from .commands import Command, build_line, is_heartbeat, normalize_command, username_reply
from .constants import DEFAULT_READ_SIZE, DEFAULT_TICK_INTERVAL, ENCODING, FIELD_DELIMITER, LINE_DELIMITER
from .errors import (
    ClassificationError,
    ErrorKind,
    ShimmerError,
    StreamEndOfInput,
    TransportReadError,
    TransportWriteError,
)
from .events import (
    BaseEvent,
    ChatMessageEvent,
    Event,
    EventKind,
    PlayerJoinEvent,
    PlayerLeaveEvent,
    PlayerListEvent,
    StoppedEvent,
    StreamClosedEvent,
    StreamErrorEvent,
    VerificationRequiredEvent,
    VerifiedEvent,
    normalize_kind,
)
from .framing import LineBuffer, encode_line, normalize_line, split_line

__all__ = [
    "Classification",
    "UNMATCHED",
    "classify_line",
    "Command",
    "build_line",
    "is_heartbeat",
    "normalize_command",
    "username_reply",
    "DEFAULT_READ_SIZE",
    "DEFAULT_TICK_INTERVAL",
    "ENCODING",
    "FIELD_DELIMITER",
    "LINE_DELIMITER",
    "ErrorKind",
    "ShimmerError",
    "TransportReadError",
    "TransportWriteError",
    "StreamEndOfInput",
    "ClassificationError",
    "EventKind",
    "normalize_kind",
    "BaseEvent",
    "Event",
    "PlayerListEvent",
    "PlayerJoinEvent",
    "PlayerLeaveEvent",
    "ChatMessageEvent",
    "VerificationRequiredEvent",
    "VerifiedEvent",
    "StreamClosedEvent",
    "StreamErrorEvent",
    "StoppedEvent",
    "LineBuffer",
    "encode_line",
    "normalize_line",
    "split_line",
]
