"""
A headless modal. It never draws anything, it only knows whether it is open
and which interactions may change that.

Drawing is done by up to four render functions, one per slot:

- render_header
- render_main
- render_footer
- render_container

Each of them is called with a read-only mapping of props and may return anything.
The header, main and footer results are put into a `Fragment` which the container
gets as `children`. Without a container the fragment is the result of the render.

Usage:

```python
modal = Modal(render_container=lambda props: props)
container = modal.update(default_visible=True, on_click=lambda e: None, on_close=print)
container.on_click(event)  # closes the modal and prints the ModalOptions
```
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Collection, Generic

from modality.Dispatcher import GatedDispatcher, GuardInputs, Slot
from modality.events.Interaction import handle_event
from modality.types import E, Fragment, Renderable, Renderer, frozendict
from modality.utils import unique_id
from modality.Visibility import (
    ModalOptions,
    VisibilityInputs,
    VisibilityReconciler,
)


@dataclass(frozen=True)
class ModalProps(Generic[E]):
    """
    Everything the caller hands in for one update cycle
    """

    visible: bool | None = None
    default_visible: bool | None = None
    loading: bool = False
    disabled_modal_close: bool | None = None
    # observers
    on_visible: Callable[[ModalOptions[E]], None] | None = None
    on_close: Callable[[ModalOptions[E]], None] | None = None
    # interactions
    on_click: Callable[[E], None] | None = None
    on_touch_end: Callable[[E], None] | None = None
    on_press: Callable[[E], None] | None = None
    # pass-through
    ref: Any = None
    title: Any = None
    close_icon_visible: bool | None = None
    close_button_visible: bool | None = None
    close_icon: Any = None
    attrs: dict[str, Any] = field(default_factory=dict)

    @property
    def guard(self) -> GuardInputs:
        return GuardInputs(bool(self.loading), self.disabled_modal_close)

    @property
    def inputs(self) -> VisibilityInputs:
        return VisibilityInputs(self.visible, self.default_visible)


class Modal(Generic[E]):
    id: str
    reconciler: VisibilityReconciler[E]
    renderers: dict[Slot, Renderer]
    close_slots: frozenset[Slot]
    props: ModalProps[E]
    slot_props: dict[Slot, frozendict]
    """ The props each slot was rendered with in the last render """

    def __init__(
        self,
        render_header: Renderer | None = None,
        render_main: Renderer | None = None,
        render_footer: Renderer | None = None,
        render_container: Renderer | None = None,
        close_slots: Collection[Slot] = (Slot.Container,),
    ):
        for slot in close_slots:
            if not isinstance(slot, Slot):
                raise ValueError(f"{slot!r} is not a Slot")
        self.id = unique_id()
        self.reconciler = VisibilityReconciler()
        given = {
            Slot.Header: render_header,
            Slot.Main: render_main,
            Slot.Footer: render_footer,
            Slot.Container: render_container,
        }
        self.renderers = {slot: r for slot, r in given.items() if r is not None}
        self.close_slots = frozenset(close_slots)
        self.props = ModalProps()
        self.slot_props = {}
        logging.debug(f"Created modal {self.id}")

    def __repr__(self) -> str:
        return f"Modal(id={self.id!r}, visible={self.visible})"

    @property
    def visible(self) -> bool:
        return self.reconciler.visible

    @property
    def guard(self) -> GuardInputs:
        """
        The guard inputs of the latest update cycle
        """
        return self.props.guard

    def update(
        self,
        visible: bool | None = None,
        default_visible: bool | None = None,
        loading: bool = False,
        disabled_modal_close: bool | None = None,
        on_visible: Callable[[ModalOptions[E]], None] | None = None,
        on_close: Callable[[ModalOptions[E]], None] | None = None,
        on_click: Callable[[E], None] | None = None,
        on_touch_end: Callable[[E], None] | None = None,
        on_press: Callable[[E], None] | None = None,
        ref: Any = None,
        title: Any = None,
        close_icon_visible: bool | None = None,
        close_button_visible: bool | None = None,
        close_icon: Any = None,
        **attrs: Any,
    ) -> Renderable:
        """
        Run one update cycle with the given props and render.

        The visibility inputs are resolved every cycle, so a controlled `visible`
        wins over a local toggle as soon as the next cycle runs.
        """
        self.props = ModalProps(
            visible,
            default_visible,
            loading,
            disabled_modal_close,
            on_visible,
            on_close,
            on_click,
            on_touch_end,
            on_press,
            ref,
            title,
            close_icon_visible,
            close_button_visible,
            close_icon,
            attrs,
        )
        self.reconciler.on_visible = on_visible
        self.reconciler.on_close = on_close
        self.reconciler.resolve(self.props.inputs)
        return self.render()

    def dispatcher(self) -> GatedDispatcher[E]:
        props = self.props
        return GatedDispatcher.from_callbacks(
            self.reconciler,
            lambda: self.guard,
            self.close_slots,
            on_click=props.on_click,
            on_touch_end=props.on_touch_end,
            on_press=props.on_press,
        )

    def shared_props(self) -> dict[str, Any]:
        """
        The fields every slot gets
        """
        props = self.props
        return {
            **props.attrs,
            "id": self.id,
            "visible": self.visible,
            "loading": props.loading,
            "default_visible": props.default_visible,
            "disabled_modal_close": props.disabled_modal_close,
            "title": props.title,
            "close_icon_visible": props.close_icon_visible,
            "close_button_visible": props.close_button_visible,
            "close_icon": props.close_icon,
            "handle_event": handle_event,
        }

    def render(self) -> Renderable:
        """
        Call the render functions with the current state and compose their results.
        Handlers are rebuilt on every render.
        """
        dispatcher = self.dispatcher()
        shared = self.shared_props()
        self.slot_props = {}

        def render_slot(slot: Slot, **extra) -> Renderable:
            renderer = self.renderers.get(slot)
            if renderer is None:
                return None
            props = frozendict({**shared, **dispatcher.slot_props(slot), **extra})
            self.slot_props[slot] = props
            return renderer(props)

        content = Fragment(
            render_slot(Slot.Header),
            render_slot(Slot.Main),
            render_slot(Slot.Footer),
        )
        if Slot.Container not in self.renderers:
            return content
        return render_slot(Slot.Container, children=content, ref=self.props.ref)
