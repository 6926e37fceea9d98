"""
Client adapter for the Shimmer chat protocol: newline-delimited, pipe-separated
lines carrying chat, player presence and identity verification over a duplex
byte stream.
"""

from .config import CLIENT_CONFIG, ConfigError, load_config
from .core import (
    ByteSink,
    ByteSource,
    EventEmitter,
    OutboundQueue,
    ShimmerClient,
    StreamByteSink,
    StreamByteSource,
    open_client,
)
from .protocol import (
    ChatMessageEvent,
    ClassificationError,
    Command,
    ErrorKind,
    EventKind,
    PlayerJoinEvent,
    PlayerLeaveEvent,
    PlayerListEvent,
    ShimmerError,
    StoppedEvent,
    StreamClosedEvent,
    StreamEndOfInput,
    StreamErrorEvent,
    TransportReadError,
    TransportWriteError,
    VerificationRequiredEvent,
    VerifiedEvent,
)

__version__ = "0.1.0"

__all__ = [
    "CLIENT_CONFIG",
    "ConfigError",
    "load_config",
    "ShimmerClient",
    "EventEmitter",
    "OutboundQueue",
    "ByteSource",
    "ByteSink",
    "StreamByteSource",
    "StreamByteSink",
    "open_client",
    "Command",
    "EventKind",
    "ErrorKind",
    "ShimmerError",
    "TransportReadError",
    "TransportWriteError",
    "StreamEndOfInput",
    "ClassificationError",
    "PlayerListEvent",
    "PlayerJoinEvent",
    "PlayerLeaveEvent",
    "ChatMessageEvent",
    "VerificationRequiredEvent",
    "VerifiedEvent",
    "StreamClosedEvent",
    "StreamErrorEvent",
    "StoppedEvent",
]
