"""State of the spaces, popups and subsurfaces a wrapper manages."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Optional, Tuple, Union


@dataclass(frozen=True)
class WaitConfigure:
    """The space waits for its next configure event."""

    first: bool
    width: int
    height: int


@dataclass(frozen=True)
class Quit:
    """The space is scheduled to clean up and exit."""


SpaceEvent = Union[WaitConfigure, Quit]


@dataclass(frozen=True)
class Hidden:
    """The space is hidden."""


@dataclass(frozen=True)
class Visible:
    """The space is visible."""


@dataclass(frozen=True)
class TransitionToHidden:
    """The space is moving towards hidden.

    ``last_instant`` is a monotonic timestamp in seconds of the last step.
    """

    last_instant: float
    progress: timedelta
    prev_margin: int


@dataclass(frozen=True)
class TransitionToVisible:
    """The space is moving towards visible.

    ``last_instant`` is a monotonic timestamp in seconds of the last step.
    """

    last_instant: float
    progress: timedelta
    prev_margin: int


Visibility = Union[Hidden, Visible, TransitionToHidden, TransitionToVisible]


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle in logical coordinates."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def size(self) -> Tuple[int, int]:
        """Width and height."""
        return (self.width, self.height)


@dataclass(frozen=True)
class PopupConfigured:
    """A configure event that placed a popup at a rectangle."""

    x: int
    y: int
    width: int
    height: int


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def scaled_size(width: int, height: int, scale: float) -> Tuple[int, int]:
    """Physical size of a logical size at ``scale``, rounded half away from zero."""
    return (_round_half_away(width * scale), _round_half_away(height * scale))


@dataclass
class PanelPopup:
    """A popup shown on behalf of an embedded client.

    ``state`` holds a configure event not yet applied, or None.
    ``viewport_destination`` is tracked only when ``has_viewport`` is set.
    """

    state: Optional[PopupConfigured] = None
    dirty: bool = False
    rectangle: Rectangle = field(default_factory=Rectangle)
    wrapper_rectangle: Rectangle = field(default_factory=Rectangle)
    has_frame: bool = True
    scale: float = 1.0
    grab: bool = False
    has_viewport: bool = False
    buffer_size: Tuple[int, int] = (1, 1)
    viewport_destination: Optional[Tuple[int, int]] = None
    damage_size: Tuple[int, int] = (0, 0)

    def apply_pending_state(self) -> bool:
        """Apply a pending configure event; return whether one was applied."""
        pending = self.state
        if pending is None:
            return False
        self.dirty = True
        self.rectangle = Rectangle(pending.x, pending.y, pending.width, pending.height)
        width, height = scaled_size(pending.width, pending.height, self.scale)
        self.buffer_size = (max(width, 1), max(height, 1))
        if self.has_viewport:
            self.viewport_destination = (max(pending.width, 1), max(pending.height, 1))
        self.damage_size = (width, height)
        self.state = None
        return True


@dataclass
class PanelSubsurface:
    """A subsurface shown on behalf of an embedded client."""

    dirty: bool = False
    rectangle: Rectangle = field(default_factory=Rectangle)
    wrapper_position: Tuple[int, int] = (0, 0)
    has_frame: bool = True
    scale: float = 1.0
    destroyed: bool = False

    def handle_events(self, alive: bool) -> bool:
        """Destroy the subsurface once its embedded surface is gone.

        Returns whether the embedded surface is still alive.
        """
        if not alive:
            self.destroyed = True
            return False
        return True


@dataclass(frozen=True)
class ServerPointerFocus:
    """Pointer focus on an embedded surface.

    ``c_pos`` is the position of the wrapping surface, ``s_pos`` that of the
    focused embedded surface, both in compositor space.
    """

    surface: Any
    seat_name: str
    c_pos: Tuple[int, int]
    s_pos: Tuple[float, float]