"""
A single source of thruth for types that are used in the other modules.
"""
from __future__ import annotations

from enum import Enum as _Enum
from typing import Any, Callable, Protocol, TypeVar

from frozendict import frozendict as _frozendict

# Aliases
##########################################################################

V_T = TypeVar("V_T")
E = TypeVar("E")  # the opaque interaction payload

Handler = Callable[[Any], None]
Renderable = Any  # whatever a render function returns, never inspected


class Enum(_Enum):
    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"


class frozendict(_frozendict):
    """
    The read-only mapping that render functions receive.
    Attribute access is allowed for convenience: `props.visible`
    """

    def __getattr__(self, name: str):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None


class Fragment(tuple):
    """
    The composition of the header, main and footer results in this order.
    Slots that rendered nothing are left out.
    """

    def __new__(cls, *parts: Renderable):
        return super().__new__(cls, (part for part in parts if part is not None))

    def __repr__(self) -> str:
        return f"Fragment({', '.join(map(repr, self))})"


class Renderer(Protocol):
    def __call__(self, props: frozendict) -> Renderable:
        ...
