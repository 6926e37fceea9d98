from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, List, Type, Union

from shimmer.core.events import EventEmitter, EventHandler
from shimmer.core.outbound import OutboundQueue
from shimmer.protocol.classifier import classify_line
from shimmer.protocol.commands import Command, build_line, is_heartbeat
from shimmer.protocol.constants import DEFAULT_READ_SIZE, DEFAULT_TICK_INTERVAL
from shimmer.protocol.errors import (
    ClassificationError,
    ShimmerError,
    StreamEndOfInput,
    TransportReadError,
    TransportWriteError,
)
from shimmer.protocol.events import (
    BaseEvent,
    EventKind,
    PlayerListEvent,
    StoppedEvent,
    StreamClosedEvent,
    StreamErrorEvent,
)
from shimmer.protocol.framing import LineBuffer, encode_line

if TYPE_CHECKING:
    from shimmer.core.streams import ByteSink, ByteSource

logger = logging.getLogger(__name__)


def _wrap(error_cls: Type[ShimmerError], message: str, exc: BaseException) -> ShimmerError:
    error = error_cls(f"{message}: {exc}")
    error.__cause__ = exc
    return error


class ShimmerClient:
    """
    Line protocol adapter over an established duplex byte stream.

    ``start()`` runs three activities on the current event loop: a read loop that
    accumulates inbound bytes, an inbound drain that classifies one buffered line per
    tick, and an outbound drain that writes one queued line per tick. Liveness only
    ever goes from alive to stopped; reconnecting needs a new client over a fresh stream.
    """

    def __init__(
        self,
        username: str,
        source: ByteSource,
        sink: ByteSink,
        verbose: bool = False,
        *,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        read_size: int = DEFAULT_READ_SIZE,
    ) -> None:
        self.username = username
        self.source = source
        self.sink = sink
        self.verbose = verbose
        self.tick_interval = tick_interval
        self.read_size = read_size

        self.events = EventEmitter()
        self.messages = OutboundQueue()
        self._buffer = LineBuffer()
        self._alive: bool = True
        self._tasks: List[asyncio.Task] = []
        self._list_waiters: List[asyncio.Future] = []

    @property
    def alive(self) -> bool:
        return self._alive

    def on(self, kind: Union[str, EventKind], handler: EventHandler, once: bool = False) -> None:
        self.events.subscribe(kind, handler, once=once)

    def off(self, kind: Union[str, EventKind], handler: EventHandler) -> None:
        self.events.unsubscribe(kind, handler)

    def start(self) -> None:
        """Start the pump. Call once: a second call runs a second set of loops."""
        self._tasks.extend(
            [
                asyncio.create_task(self._read_loop(), name="shimmer-read-loop"),
                asyncio.create_task(self._inbound_loop(), name="shimmer-inbound-drain"),
                asyncio.create_task(self._outbound_loop(), name="shimmer-outbound-drain"),
            ]
        )

    def send_message(self, text: str) -> None:
        self.messages.enqueue(text)

    async def get_player_list(self) -> List[str]:
        """
        Request the player list and wait for the next list the server sends.

        The protocol has no request ids: concurrent callers each send a request and each
        resolve with whichever list arrives next. Lines buffered before the stream ended are
        still delivered, so the call fails with StreamEndOfInput only once the inbound drain
        has finished without a list (or right away on ``stop()`` before ``start()``).
        """
        if not self._alive:
            raise StreamEndOfInput("client is no longer alive")

        waiter: asyncio.Future[List[str]] = asyncio.get_running_loop().create_future()

        def _on_list(event: PlayerListEvent) -> None:
            if not waiter.done():
                waiter.set_result(list(event.names))

        self.events.subscribe(EventKind.PLAYER_LIST, _on_list, once=True)
        self._list_waiters.append(waiter)
        self.send_message(build_line(Command.REQUEST_PLAYER_LIST))
        try:
            return await waiter
        finally:
            self.events.unsubscribe(EventKind.PLAYER_LIST, _on_list)
            self._list_waiters.remove(waiter)

    async def stop(self) -> None:
        """Emit ``stop`` and mark the client stopped. Neither flushes the queue nor closes the transport."""
        await self._emit_terminal(StoppedEvent())
        if self._alive:
            logger.info("Client for %s stopped", self.username)
        self._alive = False
        if not self._tasks:
            # no inbound drain will ever settle pending list requests
            self._fail_list_waiters("stopped")

    async def wait_closed(self) -> None:
        """Wait for every started activity to finish. The read loop ends only once its in-flight read returns."""
        if self._tasks:
            await asyncio.gather(*self._tasks)

    async def _read_loop(self) -> None:
        while True:
            if not self._alive:
                self._release()
                break
            try:
                chunk = await self.source.read(self.read_size)
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                logger.warning("Read failed: %s", exc)
                await self._terminate(StreamErrorEvent(error=_wrap(TransportReadError, "read failed", exc)))
                continue
            if not chunk:
                logger.info("Stream closed by peer")
                await self._terminate(StreamClosedEvent())
                continue
            self._buffer.feed(chunk)

    async def _inbound_loop(self) -> None:
        try:
            await self._drain_inbound()
        finally:
            self._fail_list_waiters("inbound drain finished")

    async def _drain_inbound(self) -> None:
        while True:
            await asyncio.sleep(self.tick_interval)
            # lines already buffered are still delivered after the stream ends
            if not self._alive and not self._buffer.has_line():
                break
            line = self._buffer.pop_line()
            if line is None:
                continue
            try:
                await self._receive_line(line)
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                logger.exception("Failed to handle line %r", line)
                error = ClassificationError(f"failed to handle line: {exc}", line=line)
                error.__cause__ = exc
                await self._terminate(StreamErrorEvent(error=error))
                break

    async def _outbound_loop(self) -> None:
        while True:
            await asyncio.sleep(self.tick_interval)
            if not self._alive:
                break
            line = self.messages.dequeue_one()
            if line is None:
                continue
            try:
                await self._write_line(line)
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                logger.warning("Write failed: %s", exc)
                await self._terminate(StreamErrorEvent(error=_wrap(TransportWriteError, "write failed", exc)))
                break

    async def _receive_line(self, line: str) -> None:
        text = line.strip()
        if self.verbose and not is_heartbeat(text):
            logger.info('[Read] "%s"', text)

        result = classify_line(text, self.username)
        if result.reply is not None:
            self.messages.enqueue(result.reply)
        for event in result.events:
            await self.events.emit(event)

    async def _write_line(self, line: str) -> None:
        await self.sink.write(encode_line(line))
        if self.verbose and not is_heartbeat(line):
            logger.info('[Wrote] "%s"', line.replace("\n", "\\n"))

    async def _terminate(self, event: BaseEvent) -> None:
        """Flip to stopped and surface ``event``. Only the first terminal condition is reported."""
        if not self._alive:
            return
        self._alive = False
        await self._emit_terminal(event)

    async def _emit_terminal(self, event: BaseEvent) -> None:
        try:
            await self.events.emit(event)
        except Exception:
            logger.exception("Handler for %s failed", event.kind.value)

    def _fail_list_waiters(self, reason: str) -> None:
        for waiter in self._list_waiters:
            if not waiter.done():
                waiter.set_exception(StreamEndOfInput(f"no player list arrived ({reason})"))

    def _release(self) -> None:
        for end in (self.source, self.sink):
            release = getattr(end, "release", None)
            if callable(release):
                try:
                    release()
                except Exception as exc:
                    logger.warning("Release of %r failed: %s", end, exc)
        logger.debug("Released byte source and sink")


__all__ = ["ShimmerClient"]
