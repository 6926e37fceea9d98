from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, Protocol, Tuple

from shimmer.config import CLIENT_CONFIG
from shimmer.core.connection import ShimmerClient

logger = logging.getLogger(__name__)


class ByteSource(Protocol):
    """Inbound side of the transport. ``read`` returns ``b""`` once the peer ended the stream."""

    async def read(self, n: int = -1) -> bytes: ...

    def release(self) -> None: ...


class ByteSink(Protocol):
    """Outbound side of the transport. ``write`` raises when the submission fails."""

    async def write(self, data: bytes) -> None: ...

    def release(self) -> None: ...


class StreamByteSource:
    """Adapts an ``asyncio.StreamReader`` to the byte source contract."""

    def __init__(self, reader: asyncio.StreamReader) -> None:
        self._reader: Optional[asyncio.StreamReader] = reader

    async def read(self, n: int = -1) -> bytes:
        if self._reader is None:
            raise RuntimeError("byte source already released")
        return await self._reader.read(n)

    def release(self) -> None:
        self._reader = None


class StreamByteSink:
    """Adapts an ``asyncio.StreamWriter``; each write waits for ``drain``."""

    def __init__(self, writer: asyncio.StreamWriter) -> None:
        self._writer: Optional[asyncio.StreamWriter] = writer

    async def write(self, data: bytes) -> None:
        if self._writer is None:
            raise RuntimeError("byte sink already released")
        self._writer.write(data)
        await self._writer.drain()

    def release(self) -> None:
        # the transport itself stays open; closing it is the owner's call
        self._writer = None


async def open_client(
    config: Optional[Dict[str, Any]] = None, **overrides: Any
) -> Tuple[ShimmerClient, asyncio.StreamWriter]:
    """
    Open a TCP connection and return a started client plus the raw writer.
    The caller closes the writer after observing a terminal event.
    """
    settings = {**(config or CLIENT_CONFIG), **overrides}
    host: str = settings["server_host"]
    port = int(settings["server_port"])
    reader, writer = await asyncio.open_connection(host, port)
    logger.info("Connected to %s:%s", host, port)

    client = ShimmerClient(
        username=settings["username"],
        source=StreamByteSource(reader),
        sink=StreamByteSink(writer),
        verbose=bool(settings["verbose"]),
        tick_interval=float(settings["tick_interval"]),
        read_size=int(settings["read_size"]),
    )
    client.start()
    return client, writer


__all__ = ["ByteSource", "ByteSink", "StreamByteSource", "StreamByteSink", "open_client"]
