"""Layer-shell placement settings shared by wrapped surfaces."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Tuple, runtime_checkable


class Layer(enum.Enum):
    """Layer on which a surface is placed."""

    BACKGROUND = "Background"
    BOTTOM = "Bottom"
    TOP = "Top"
    OVERLAY = "Overlay"

    def __str__(self) -> str:
        return self.value


class KeyboardInteractivity(enum.Enum):
    """Keyboard interactivity level of a surface."""

    NONE = "None"
    EXCLUSIVE = "Exclusive"
    ON_DEMAND = "OnDemand"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WrapperOutput:
    """Outputs a wrapper places surfaces on.

    ``names`` of ``None`` stands for every output; otherwise it lists the
    output names in order.
    """

    names: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if self.names is not None:
            object.__setattr__(self, "names", tuple(self.names))

    @classmethod
    def named(cls, names: Iterable[str]) -> "WrapperOutput":
        """Build an output set naming the given outputs."""
        return cls(tuple(names))

    def merge(self, other: "WrapperOutput") -> "WrapperOutput":
        """Combine two output sets; either covering every output wins."""
        if self.names is None or other.names is None:
            return WrapperOutput()
        return WrapperOutput(self.names + other.names)


@runtime_checkable
class WrapperConfig(Protocol):
    """Anything that configures a wrapped surface."""

    name: str

    def outputs(self) -> WrapperOutput:
        """Outputs the configuration applies to."""
        ...