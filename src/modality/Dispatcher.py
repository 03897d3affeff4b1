"""
The Gated Dispatcher decides whether an interaction is allowed to toggle the modal.

For every slot and every interaction kind the caller registered a handler for,
it produces a wrapped handler that

1. evaluates the guard (at the time of the event, never earlier),
2. lets the reconciler toggle if the guard permits,
3. forwards the event to the callers own handler.

It holds no state and is rebuilt on every render.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import auto
from typing import Callable, Collection, Generic, Mapping

from modality.events.Interaction import handle_event
from modality.types import E, Enum, Handler
from modality.Visibility import VisibilityReconciler


class InteractionKind(Enum):
    """
    The value is the name under which the wrapped handler is given to a slot
    """

    Click = "on_click"
    TouchEnd = "on_touch_end"
    Press = "on_press"


class Slot(Enum):
    Header = auto()
    Main = auto()
    Footer = auto()
    Container = auto()


@dataclass(frozen=True)
class GuardInputs:
    loading: bool = False
    disabled_close: bool | None = None


def permits(guard: GuardInputs, close_slot: bool) -> bool:
    """
    Whether an interaction on a slot may toggle the visibility.

    Loading blocks every slot. Disabled close only blocks close slots.
    """
    if close_slot:
        return not guard.loading and not guard.disabled_close
    return not guard.loading


@dataclass(frozen=True)
class GatedDispatcher(Generic[E]):
    reconciler: VisibilityReconciler[E]
    guard: Callable[[], GuardInputs]
    """ Read on every event so that the latest loading state counts """
    callbacks: Mapping[InteractionKind, Callable[[E], None]]
    """ Only registered kinds are in here """
    close_slots: Collection[Slot] = (Slot.Container,)

    @classmethod
    def from_callbacks(
        cls,
        reconciler: VisibilityReconciler[E],
        guard: Callable[[], GuardInputs],
        close_slots: Collection[Slot] = (Slot.Container,),
        *,
        on_click: Callable[[E], None] | None = None,
        on_touch_end: Callable[[E], None] | None = None,
        on_press: Callable[[E], None] | None = None,
    ) -> GatedDispatcher[E]:
        """
        Registration is inferred from which of the three callbacks are given
        """
        given = {
            InteractionKind.Click: on_click,
            InteractionKind.TouchEnd: on_touch_end,
            InteractionKind.Press: on_press,
        }
        return cls(
            reconciler,
            guard,
            {kind: cb for kind, cb in given.items() if cb is not None},
            close_slots,
        )

    def is_close_slot(self, slot: Slot) -> bool:
        return slot in self.close_slots

    def permitted(self, slot: Slot) -> bool:
        return permits(self.guard(), self.is_close_slot(slot))

    def wrap(self, kind: InteractionKind, slot: Slot) -> Handler:
        """
        The guarded handler for one kind on one slot
        """
        callback = self.callbacks[kind]

        def handler(event: E):
            self.reconciler.toggle(event, self.permitted(slot), callback)

        handler.__name__ = f"{slot.name.lower()}_{kind.value}"
        return handler

    def handlers(self, slot: Slot) -> dict[InteractionKind, Handler]:
        return {kind: self.wrap(kind, slot) for kind in self.callbacks}

    def slot_props(self, slot: Slot) -> dict[str, Handler]:
        """
        The handlers keyed by the name the slot sees them under, like `on_click`.
        They stop the propagation of the event so that one interaction toggles once.
        """
        return {
            kind.value: handle_event(handler)
            for kind, handler in self.handlers(slot).items()
        }
