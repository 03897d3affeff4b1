"""
Translates pygame events into interactions and hands them to the slots of a rendered modal.

- mouse button up (main button) -> Click
- finger up -> TouchEnd
- Return, keypad Enter or Space up -> Press

Pointer interactions go to the slots under the pointer, innermost first,
and bubble up to the container unless a handler stops the propagation.
Presses go to the focused slot.
"""
from __future__ import annotations

import logging
import time
from typing import Mapping

import pygame as pg

from modality.Dispatcher import InteractionKind, Slot
from modality.events.Interaction import InteractionEvent

MAIN_MB = 1

press_keys: dict[int, str] = {
    pg.K_RETURN: "Enter",
    pg.K_KP_ENTER: "Enter",
    pg.K_SPACE: " ",
}

# the order in which overlapping slots get the event
bubble_order = (Slot.Header, Slot.Main, Slot.Footer, Slot.Container)


def translate(
    event: pg.event.Event, size: tuple[int, int] = (1, 1)
) -> tuple[InteractionKind, InteractionEvent] | None:
    """
    The interaction a pygame event stands for or None if it doesn't stand for one.
    `size` is needed to turn the normalized finger positions into pixels.
    """
    if event.type == pg.MOUSEBUTTONUP and event.button == MAIN_MB:
        return InteractionKind.Click, InteractionEvent(
            time.monotonic(),
            "click",
            pos=tuple(event.pos),
            button=event.button,
            source=event,
        )
    elif event.type == pg.FINGERUP:
        w, h = size
        return InteractionKind.TouchEnd, InteractionEvent(
            time.monotonic(),
            "touchend",
            pos=(int(event.x * w), int(event.y * h)),
            source=event,
        )
    elif event.type == pg.KEYUP and event.key in press_keys:
        return InteractionKind.Press, InteractionEvent(
            time.monotonic(),
            "press",
            key=press_keys[event.key],
            source=event,
        )
    return None


class SlotHitTester:
    """
    Knows where the slots of a modal are on the screen.
    The host places the slots after drawing them and calls `dispatch` for every pygame event.
    """

    rects: dict[Slot, pg.Rect]
    focus: Slot
    size: tuple[int, int]

    def __init__(self, size: tuple[int, int] = (900, 600), focus: Slot = Slot.Container):
        self.rects = {}
        self.focus = focus
        self.size = size

    def place(self, slot: Slot, rect: pg.Rect | tuple[int, int, int, int]):
        self.rects[slot] = pg.Rect(rect)

    def hit(self, pos: tuple[int, int]) -> list[Slot]:
        """
        The slots under `pos`, innermost first
        """
        return [
            slot
            for slot in bubble_order
            if (rect := self.rects.get(slot)) is not None and rect.collidepoint(pos)
        ]

    def dispatch(
        self, event: pg.event.Event, props: Mapping[Slot, Mapping]
    ) -> list[Slot]:
        """
        Call the handlers the slots were rendered with.
        Returns the slots whose handler was called.
        """
        translated = translate(event, self.size)
        if translated is None:
            return []
        kind, interaction = translated
        targets = (
            [self.focus]
            if kind is InteractionKind.Press
            else self.hit(interaction.pos)
        )
        called: list[Slot] = []
        for slot in targets:
            handler = props.get(slot, {}).get(kind.value)
            if handler is None:
                continue
            logging.debug(f"Dispatching {interaction.type} to {slot}")
            handler(interaction)
            called.append(slot)
            if not interaction.propagation:
                break
        return called
