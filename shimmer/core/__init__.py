from .connection import ShimmerClient
from .events import EventEmitter, EventHandler
from .outbound import OutboundQueue
from .streams import ByteSink, ByteSource, StreamByteSink, StreamByteSource, open_client

__all__ = [
    "ShimmerClient",
    "EventEmitter",
    "EventHandler",
    "OutboundQueue",
    "ByteSource",
    "ByteSink",
    "StreamByteSource",
    "StreamByteSink",
    "open_client",
]
