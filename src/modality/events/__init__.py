from .Interaction import InteractionEvent, handle_event

__all__ = ["InteractionEvent", "handle_event"]
