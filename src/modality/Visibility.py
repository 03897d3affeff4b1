"""
The Visibility Reconciler owns the one boolean that says whether the modal is open.

It gets its value from three places:

1. the controlled value `visible` that the caller supplies every update cycle
2. the default value `default_visible` that is only looked at once, in the very first cycle
3. toggles caused by interactions that were allowed by the guard (see `modality.Dispatcher`)

Observers are told about real transitions only. The first settle just establishes
the baseline and is silent, re-resolving unchanged inputs is silent too.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import auto
from typing import Callable, Generic

from modality.config import g
from modality.types import E, Enum
from modality.utils import call_safely, make_default


class Lifecycle(Enum):
    Uninitialized = auto()
    """ The default-vs-controlled resolution has not happened yet """
    Settled = auto()
    """ The baseline exists, from now on only the controlled value matters """


@dataclass(frozen=True)
class ModalOptions(Generic[E]):
    """
    What observers receive on every transition
    """

    visible: bool
    event: E | None = None
    """ None when the transition came from a changed controlled value """


@dataclass(frozen=True)
class VisibilityInputs:
    controlled_visible: bool | None = None
    default_visible: bool | None = None


@dataclass
class VisibilityState:
    current_visible: bool | None = None
    lifecycle: Lifecycle = Lifecycle.Uninitialized


Observer = Callable[[ModalOptions], None]


class VisibilityReconciler(Generic[E]):
    """
    The only thing allowed to change `state.current_visible`.

    `on_visible` is called on every transition,
    `on_close` only on transitions that end in the closed state.
    Both can be swapped between update cycles.
    """

    state: VisibilityState
    on_visible: Observer | None
    on_close: Observer | None

    def __init__(
        self, on_visible: Observer | None = None, on_close: Observer | None = None
    ):
        self.state = VisibilityState()
        self.on_visible = on_visible
        self.on_close = on_close

    @property
    def visible(self) -> bool:
        return bool(self.state.current_visible)

    @property
    def settled(self) -> bool:
        return self.state.lifecycle is Lifecycle.Settled

    def notify(self, options: ModalOptions[E]):
        """
        Tell the observers about a transition.
        A failing observer is logged and does not keep the other one from being called.
        """
        if g["log_transitions"]:
            logging.debug(f"Modal visibility -> {options.visible}")
        if self.on_visible is not None:
            call_safely(self.on_visible, options)
        if not options.visible and self.on_close is not None:
            call_safely(self.on_close, options)

    def resolve(self, inputs: VisibilityInputs) -> bool:
        """
        Absorb the inputs of one update cycle.
        Returns whether the visibility changed observably.
        """
        state = self.state
        if state.lifecycle is Lifecycle.Uninitialized:
            state.lifecycle = Lifecycle.Settled
            # no opinion at all still has to settle somewhere
            state.current_visible = make_default(
                make_default(inputs.controlled_visible, inputs.default_visible), False
            )
            return False
        next_visible = inputs.controlled_visible
        if next_visible is None or next_visible == state.current_visible:
            return False
        self.notify(ModalOptions(visible=next_visible))
        state.current_visible = next_visible
        return True

    def toggle(
        self,
        event: E,
        permitted: bool,
        callback: Callable[[E], None] | None = None,
    ) -> bool:
        """
        Flip the visibility if `permitted`, then hand the event to `callback`.

        The callback is called whether or not the toggle happened.
        Only the visibility side effect depends on the guard.
        Returns whether the toggle happened.
        """
        if permitted:
            next_visible = not self.state.current_visible
            self.state.current_visible = next_visible
            self.notify(ModalOptions(visible=next_visible, event=event))
        elif g["log_transitions"]:
            logging.debug("Modal toggle denied by guard")
        if callback is not None and (permitted or g["forward_denied_events"]):
            call_safely(callback, event)
        return permitted
