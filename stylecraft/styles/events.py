"""Synchronous change notifications."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class EventChannel(Generic[T]):
    """A typed list of observers, called in connection order on emit."""

    def __init__(self) -> None:
        self._observers: list[Callable[[T], object]] = []

    def connect(self, observer: Callable[[T], object]) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def disconnect(self, observer: Callable[[T], object]) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def emit(self, payload: T) -> None:
        for observer in list(self._observers):
            observer(payload)
