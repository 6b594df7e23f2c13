"""Tests for synchronous observer channels."""

from __future__ import annotations

from stylecraft.styles.events import EventChannel


def test_emit_calls_observers_in_connection_order() -> None:
    channel: EventChannel[str] = EventChannel()
    calls: list[tuple[str, str]] = []
    channel.connect(lambda name: calls.append(("first", name)))
    channel.connect(lambda name: calls.append(("second", name)))

    channel.emit("dark")

    assert calls == [("first", "dark"), ("second", "dark")]


def test_connect_ignores_duplicates() -> None:
    channel: EventChannel[str] = EventChannel()
    calls: list[str] = []
    channel.connect(calls.append)
    channel.connect(calls.append)

    channel.emit("alpha")

    assert calls == ["alpha"]


def test_disconnect_stops_delivery() -> None:
    channel: EventChannel[str] = EventChannel()
    kept: list[str] = []
    dropped: list[str] = []
    channel.connect(kept.append)
    channel.connect(dropped.append)

    channel.disconnect(dropped.append)
    channel.emit("alpha")

    assert kept == ["alpha"]
    assert dropped == []


def test_disconnect_unknown_observer_is_ignored() -> None:
    channel: EventChannel[str] = EventChannel()
    calls: list[str] = []
    channel.connect(calls.append)

    channel.disconnect(print)
    channel.emit("alpha")

    assert calls == ["alpha"]


def test_observer_may_disconnect_itself_during_emit() -> None:
    channel: EventChannel[None] = EventChannel()
    calls: list[str] = []

    def once(_: None) -> None:
        calls.append("once")
        channel.disconnect(once)

    channel.connect(once)
    channel.emit(None)
    channel.emit(None)

    assert calls == ["once"]
