"""A minimal observer pattern used by the services to refresh their views."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Something that wants to hear when a subject changes."""

    @abstractmethod
    def update(self) -> None:
        """React to a change in the observed subject."""


class Subject:
    """Keeps a list of observers and tells them about changes."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def register_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def unregister_observer(self, observer: Observer) -> None:
        """Remove the first registration of ``observer``; unknown ones are ignored."""
        for position, registered in enumerate(self._observers):
            if registered is observer:
                del self._observers[position]
                return

    def notify(self) -> None:
        for observer in tuple(self._observers):
            observer.update()