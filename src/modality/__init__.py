import modality.config
from modality.config import reset_config, set_config

from .Dispatcher import GatedDispatcher, GuardInputs, InteractionKind, Slot, permits
from .events import InteractionEvent, handle_event
from .Modal import Modal, ModalProps
from .types import Fragment, frozendict
from .Visibility import (
    Lifecycle,
    ModalOptions,
    VisibilityInputs,
    VisibilityReconciler,
    VisibilityState,
)

g = modality.config.g

__all__ = [
    # component
    "Modal",
    "ModalProps",
    "ModalOptions",
    "Fragment",
    "frozendict",
    # reconciler
    "Lifecycle",
    "VisibilityInputs",
    "VisibilityReconciler",
    "VisibilityState",
    # dispatcher
    "GatedDispatcher",
    "GuardInputs",
    "InteractionKind",
    "Slot",
    "permits",
    # events
    "InteractionEvent",
    "handle_event",
    # config
    "set_config",
    "reset_config",
]
