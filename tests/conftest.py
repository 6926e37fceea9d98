from __future__ import annotations

import asyncio
from typing import List, Optional, Union

import pytest

from shimmer.core.connection import ShimmerClient

TICK = 0.001


class FakeSource:
    """Byte source fed from the test: push bytes, an exception, or None for end of input."""

    def __init__(self) -> None:
        self.queue: asyncio.Queue[Union[bytes, BaseException, None]] = asyncio.Queue()
        self.released = False
        self.reads = 0

    def push(self, item: Union[bytes, str, BaseException, None]) -> None:
        if isinstance(item, str):
            item = item.encode("utf-8")
        self.queue.put_nowait(item)

    def close(self) -> None:
        self.push(None)

    async def read(self, n: int = -1) -> bytes:
        self.reads += 1
        item = await self.queue.get()
        if item is None:
            return b""
        if isinstance(item, BaseException):
            raise item
        return item

    def release(self) -> None:
        self.released = True


class FakeSink:
    def __init__(self, fail_with: Optional[BaseException] = None) -> None:
        self.written: List[bytes] = []
        self.fail_with = fail_with
        self.released = False

    async def write(self, data: bytes) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.written.append(data)

    def release(self) -> None:
        self.released = True

    @property
    def lines(self) -> List[str]:
        return [chunk.decode("utf-8") for chunk in self.written]


class Recorder:
    """Collects every event of the subscribed kinds, in emission order."""

    def __init__(self) -> None:
        self.events: list = []

    def __call__(self, event) -> None:
        self.events.append(event)

    def kinds(self) -> List[str]:
        return [event.kind.value for event in self.events]


async def wait_until(predicate, timeout: float = 1.0) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not reached in time")
        await asyncio.sleep(TICK)


@pytest.fixture
def source():
    return FakeSource()


@pytest.fixture
def sink():
    return FakeSink()


@pytest.fixture
def make_client(source, sink):
    def _make(username: str = "Alice", verbose: bool = False, **kwargs) -> ShimmerClient:
        return ShimmerClient(
            username=username,
            source=kwargs.pop("source", source),
            sink=kwargs.pop("sink", sink),
            verbose=verbose,
            tick_interval=TICK,
            **kwargs,
        )

    return _make
