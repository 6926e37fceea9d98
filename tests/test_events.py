import pytest
from pydantic import TypeAdapter

from shimmer.core import EventEmitter, OutboundQueue
from shimmer.protocol import (
    ChatMessageEvent,
    Event,
    EventKind,
    PlayerJoinEvent,
    PlayerListEvent,
    StoppedEvent,
    normalize_kind,
)


def test_send_normalizes_terminator():
    queue = OutboundQueue()
    queue.enqueue("ping")
    queue.enqueue("ping\n")
    assert queue.snapshot() == ["ping\n", "ping\n"]


def test_queue_is_fifo():
    queue = OutboundQueue()
    for line in ("a", "b", "c"):
        queue.enqueue(line)
    assert [queue.dequeue_one() for _ in range(4)] == ["a\n", "b\n", "c\n", None]
    assert not queue


def test_normalize_kind_accepts_wire_and_enum_names():
    assert normalize_kind("playerList") is EventKind.PLAYER_LIST
    assert normalize_kind("PLAYER_LIST") is EventKind.PLAYER_LIST
    assert normalize_kind(EventKind.STOPPED) is EventKind.STOPPED
    with pytest.raises(ValueError):
        normalize_kind("bogus")


@pytest.mark.asyncio
async def test_handlers_run_in_registration_order():
    emitter = EventEmitter()
    calls = []

    async def second(event):
        calls.append(("second", event.name))

    emitter.subscribe("playerJoin", lambda event: calls.append(("first", event.name)))
    emitter.subscribe(EventKind.PLAYER_JOIN, second)
    emitter.subscribe(EventKind.PLAYER_LEAVE, lambda event: calls.append(("leave", event.name)))

    await emitter.emit(PlayerJoinEvent(name="Alice"))
    assert calls == [("first", "Alice"), ("second", "Alice")]


@pytest.mark.asyncio
async def test_once_handler_fires_once():
    emitter = EventEmitter()
    seen = []
    emitter.subscribe(EventKind.CHAT_MESSAGE, seen.append, once=True)

    await emitter.emit(ChatMessageEvent(player="a", text="1"))
    await emitter.emit(ChatMessageEvent(player="a", text="2"))

    assert [event.text for event in seen] == ["1"]
    assert emitter.listener_count(EventKind.CHAT_MESSAGE) == 0


@pytest.mark.asyncio
async def test_unsubscribe_and_handler_errors_propagate():
    emitter = EventEmitter()
    seen = []

    def boom(event):
        raise RuntimeError("handler failed")

    emitter.subscribe(EventKind.PLAYER_JOIN, seen.append)
    emitter.unsubscribe(EventKind.PLAYER_JOIN, seen.append)
    emitter.subscribe(EventKind.PLAYER_JOIN, boom)

    with pytest.raises(RuntimeError):
        await emitter.emit(PlayerJoinEvent(name="Alice"))
    assert seen == []


def test_event_union_picks_variant_by_kind():
    adapter = TypeAdapter(Event)
    assert adapter.validate_python({"kind": "playerList", "names": ["a", ""]}) == PlayerListEvent(names=["a", ""])
    assert adapter.validate_python({"kind": "stop"}) == StoppedEvent()
