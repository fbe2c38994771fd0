"""Events that handlers can subscribe to and that call them when invoked."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Generic, List, NewType, TypeVar

HandlerId = NewType("HandlerId", int)

T = TypeVar("T")
A = TypeVar("A", bound="EventArgs")


class EventArgs:
    """Base class for event arguments."""


@dataclass(frozen=True)
class ParamEventArgs(EventArgs, Generic[T]):
    """Event arguments carrying a single parameter."""

    param: T


class Event(Generic[A]):
    """An event whose subscribed handlers are called, in order, on invocation.

    A handler id is the position the handler held when it was subscribed;
    removing a handler shifts the positions of those after it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._handlers: List[Callable[[A], object]] = []

    def subscribe(self, handler: Callable[[A], object]) -> HandlerId:
        """Add a handler and return its id."""
        if not callable(handler):
            raise TypeError("handler must be callable")
        with self._lock:
            self._handlers.append(handler)
            return HandlerId(len(self._handlers) - 1)

    def unsubscribe(self, handler_id: int) -> None:
        """Remove the handler at the given id; unknown ids are ignored."""
        with self._lock:
            if 0 <= handler_id < len(self._handlers):
                del self._handlers[handler_id]

    def invoke(self, args: A) -> None:
        """Call every handler with the given arguments."""
        if not isinstance(args, EventArgs):
            raise TypeError("event arguments must be an EventArgs instance")
        with self._lock:
            handlers = list(self._handlers)
        for handler in handlers:
            handler(args)

    def __call__(self, args: A) -> None:
        self.invoke(args)

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)

    def __copy__(self) -> "Event[A]":
        clone: Event[A] = Event()
        with self._lock:
            clone._handlers = list(self._handlers)
        return clone