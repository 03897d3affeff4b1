from .func import call, call_safely, log_error, make_default
from .ids import unique_id

__all__ = [
    "call",
    "call_safely",
    "log_error",
    "make_default",
    "unique_id",
]
