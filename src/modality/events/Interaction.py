"""
The payload that is handed to slot handlers when the host uses `modality.events.pg`.
The core itself never looks inside an event, any object works.
"""
from __future__ import annotations

from typing import Any, Callable

from modality.config import g
from modality.types import Handler


class InteractionEvent:
    """
    An interaction that gets passed to handlers
    """

    timestamp: float
    type: str
    cancelled: bool = False
    """ A cancelled event should not trigger the default action of the host """
    propagation: bool = True

    # pointer
    pos: tuple[int, int] = (0, 0)
    button: int = 0
    # keyboard
    key: str = ""
    # the native event this was translated from
    source: Any = None

    def __init__(self, timestamp: float, type_: str, **kwargs: Any):
        self.timestamp = timestamp
        self.type = type_
        self.__dict__.update(kwargs)

    def stop_propagation(self):
        self.propagation = False

    def prevent_default(self):
        self.cancelled = True

    def __str__(self) -> str:
        attrs = ", ".join(f"{k} = {v}" for k, v in self.__dict__.items())
        return f"InteractionEvent({attrs})"


def handle_event(
    callback: Callable[[Any], Any],
    stop_propagation: bool | None = None,
    prevent_default: bool = False,
) -> Handler:
    """
    Wrap a handler so that the event stops propagating (and optionally is cancelled)
    before the callback sees it. Events that don't support this are passed through untouched.

    `stop_propagation` defaults to `g["stop_propagation"]`
    """

    def inner(event):
        stop = g["stop_propagation"] if stop_propagation is None else stop_propagation
        if stop and callable(_stop := getattr(event, "stop_propagation", None)):
            _stop()
        if prevent_default and callable(_prevent := getattr(event, "prevent_default", None)):
            _prevent()
        return callback(event)

    return inner
