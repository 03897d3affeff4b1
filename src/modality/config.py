""" Any global variables are stored here"""
import logging
from typing import Any, overload

# fmt: off
g: dict[str, Any] = {
    # User settable
    "id_prefix": ":m",                  # str
    "forward_denied_events": True,      # bool
    "stop_propagation": True,           # bool
    "log_transitions": True,            # bool
}
# fmt: on

defaults: dict[str, Any] = g.copy()


@overload
def set_config():
    ...


@overload
def set_config(
    *,
    id_prefix: str | None = None,
    forward_denied_events: bool | None = None,
    stop_propagation: bool | None = None,
    log_transitions: bool | None = None,
):
    ...


def set_config(**kwargs):
    """
    Change the global configuration. Keys that are `None` are left as they are.

    `set_config(forward_denied_events=False)`
    """
    for key in kwargs:
        if key not in g:
            raise ValueError(f"Unknown config key {key!r}")
    changed = {k: v for k, v in kwargs.items() if v is not None}
    g.update(changed)
    if changed:
        logging.debug(f"Config changed: {changed}")


def reset_config():
    """
    Restore every setting to its default
    """
    g.clear()
    g.update(defaults)
