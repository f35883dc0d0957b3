"""Bookkeeping for surfaces that embedded clients commit to the wrapper."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple, Union

Size = Tuple[int, int]

_GENERATION_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class WaitingFirst:
    """No configure has been received for the proxied surface yet."""

    generation: int
    size: Size


@dataclass(frozen=True)
class Waiting:
    """A resize was requested; waiting for the matching configure."""

    generation: int
    size: Size


@dataclass(frozen=True)
class Dirty:
    """The proxied surface has new content to draw."""

    generation: int


SurfaceState = Union[WaitingFirst, Waiting, Dirty]


class CommitRole(enum.Enum):
    """Role of a committed embedded surface."""

    XDG_TOPLEVEL = "xdg_toplevel"
    XDG_POPUP = "xdg_popup"
    LAYER_SURFACE = "zwlr_layer_surface_v1"
    DND_ICON = "dnd_icon"
    SUBSURFACE = "subsurface"
    OTHER = "other"


_KNOWN_ROLES = {role.value: role for role in CommitRole if role is not CommitRole.OTHER}


def commit_role(role: Optional[str]) -> CommitRole:
    """Classify a surface role name; unknown or missing roles are OTHER."""
    if role is None:
        return CommitRole.OTHER
    return _KNOWN_ROLES.get(role, CommitRole.OTHER)


def exclusive_zone_value(zone: Union[int, str]) -> int:
    """Layer-shell exclusive zone as the protocol integer.

    An int is an exclusive area in pixels; ``"Neutral"`` gives 0 and
    ``"DontCare"`` gives -1.
    """
    if isinstance(zone, bool):
        raise ValueError(f"invalid exclusive zone: {zone!r}")
    if isinstance(zone, int):
        if zone < 0:
            raise ValueError("an exclusive area must not be negative")
        return zone
    if zone == "Neutral":
        return 0
    if zone == "DontCare":
        return -1
    raise ValueError(f"invalid exclusive zone: {zone!r}")


def commit_layer_size(
    state: SurfaceState, old_size: Size, new_size: Size
) -> Tuple[SurfaceState, bool]:
    """Next state of a proxied layer surface after a commit.

    Returns the new state and whether the client surface must be resized.
    Commits with an empty size, or before the first configure, change nothing.
    """
    width, height = new_size
    if width <= 0 or height <= 0:
        return state, False
    if isinstance(state, WaitingFirst):
        return state, False
    generation = state.generation
    if tuple(old_size) != tuple(new_size):
        old_w, old_h = old_size
        if old_w == 0 or old_h == 0:
            return Dirty(generation), True
        next_generation = (generation + 1) & _GENERATION_MASK
        return Waiting(next_generation, (width, height)), True
    return Dirty(generation), False


class ProxiedLayerSurfaces:
    """Layer surfaces created by embedded clients and their scale factors."""

    def __init__(self) -> None:
        self._scales: Dict[object, float] = {}

    def __len__(self) -> int:
        return len(self._scales)

    def __contains__(self, surface_id: object) -> bool:
        return surface_id in self._scales

    def __iter__(self) -> Iterator[object]:
        return iter(self._scales)

    def add(self, surface_id: object, scale: float = 1.0) -> None:
        """Track a surface, or update the scale of a tracked one."""
        if scale <= 0:
            raise ValueError("scale must be positive")
        self._scales[surface_id] = float(scale)

    def remove(self, surface_id: object) -> bool:
        """Stop tracking a destroyed surface; return whether it was tracked."""
        return self._scales.pop(surface_id, None) is not None

    def preferred_scale(self, surface_id: object, fallback: Optional[float] = None) -> float:
        """Scale of a tracked surface, else ``fallback``, else 1.0."""
        scale = self._scales.get(surface_id)
        if scale is not None:
            return scale
        return 1.0 if fallback is None else fallback