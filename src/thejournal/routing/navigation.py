"""Navigation primitives: locations, requests and an in-memory history."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urlsplit

logger = logging.getLogger("thejournal.routing.navigation")


@dataclass(frozen=True, slots=True)
class Location:
    path: str = "/"
    query: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, href: str) -> Location:
        """Parse ``/path?query#fragment`` (scheme and host are ignored).

        A relative path such as ``post/1`` is rooted as ``/post/1``.
        """
        parts = urlsplit(href)
        path = parts.path or "/"
        if not path.startswith("/"):
            path = "/" + path
        return cls(path=path, query=parts.query, fragment=parts.fragment)

    @property
    def href(self) -> str:
        href = self.path
        if self.query:
            href += f"?{self.query}"
        if self.fragment:
            href += f"#{self.fragment}"
        return href


@dataclass(frozen=True, slots=True)
class NavigationRequest:
    """Ask the navigator to show *path*.

    ``replace`` overwrites the current history entry instead of pushing one.
    """

    path: str
    query: str = ""
    fragment: str = ""
    replace: bool = False

    @property
    def location(self) -> Location:
        return Location(path=self.path, query=self.query, fragment=self.fragment)

    @property
    def href(self) -> str:
        return self.location.href


class Navigator(Protocol):
    @property
    def location(self) -> Location:  # pragma: no cover - structural protocol
        """Current location."""

    def navigate(self, request: NavigationRequest) -> None:  # pragma: no cover - structural protocol
        """Apply a navigation request."""


Listener = Callable[[Location], None]


class HistoryNavigator:
    """Browser-style history kept in memory.

    Pushing truncates any forward entries; replacing rewrites the current one.
    Listeners run after every navigation with the new location.
    """

    def __init__(self, initial: Location | str = "/") -> None:
        if isinstance(initial, str):
            initial = Location.parse(initial)
        self.entries: list[Location] = [initial]
        self.index = 0
        self._listeners: list[Listener] = []

    @property
    def location(self) -> Location:
        return self.entries[self.index]

    def navigate(self, request: NavigationRequest) -> None:
        target = request.location
        if request.replace:
            self.entries[self.index] = target
        else:
            del self.entries[self.index + 1:]
            self.entries.append(target)
            self.index += 1
        logger.debug("%s %s", "replace" if request.replace else "push", target.href)
        self._notify(target)

    def back(self) -> Location:
        if self.index > 0:
            self.index -= 1
            self._notify(self.location)
        return self.location

    def listen(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; the returned callable unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, location: Location) -> None:
        for listener in list(self._listeners):
            listener(location)
