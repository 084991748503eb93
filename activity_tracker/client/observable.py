"""Minimal publish/subscribe primitive used to signal state changes."""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

Observer = Callable[[], None]


class Subscription:
    """Token returned by :meth:`Observable.subscribe`."""

    def __init__(self, observable: "Observable", observer: Observer) -> None:
        self._observable = observable
        self._observer = observer
        self.active = True

    def unsubscribe(self) -> None:
        """Detach the observer; calling it twice is harmless."""

        if self.active:
            self._observable._remove(self._observer)
            self.active = False


class Observable:
    """Fan a payload-less "changed" signal out to registered observers.

    Observers run synchronously, in registration order. An exception raised by
    one observer is logged and the remaining observers still run.
    """

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def subscribe(self, observer: Observer) -> Subscription:
        self._observers.append(observer)
        return Subscription(self, observer)

    def notify(self) -> None:
        for observer in list(self._observers):
            try:
                observer()
            except Exception:
                logger.exception("Observer %r failed while handling a change", observer)

    def _remove(self, observer: Observer) -> None:
        try:
            self._observers.remove(observer)
        except ValueError:
            return


__all__ = ["Observable", "Observer", "Subscription"]
