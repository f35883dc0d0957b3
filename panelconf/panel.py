"""Configuration of a single panel or dock."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, List, Optional, Tuple

from panelconf.wrapper import KeyboardInteractivity, Layer, WrapperOutput

ANCHOR_TOP = 1
ANCHOR_BOTTOM = 2
ANCHOR_LEFT = 4
ANCHOR_RIGHT = 8
ANCHOR_ALL = ANCHOR_TOP | ANCHOR_BOTTOM | ANCHOR_LEFT | ANCHOR_RIGHT


class PanelAnchor(enum.Enum):
    """Edge to which the panel is anchored."""

    LEFT = "Left"
    RIGHT = "Right"
    TOP = "Top"
    BOTTOM = "Bottom"

    def __str__(self) -> str:
        return self.value


def parse_anchor(text: str) -> PanelAnchor:
    """Parse an anchor from its display name."""
    try:
        return PanelAnchor(text)
    except ValueError:
        raise ValueError("Not a valid PanelAnchor") from None


def anchor_from_bits(bits: int) -> PanelAnchor:
    """Pick the panel anchor from layer-shell anchor bits."""
    for flag, anchor in (
        (ANCHOR_LEFT, PanelAnchor.LEFT),
        (ANCHOR_RIGHT, PanelAnchor.RIGHT),
        (ANCHOR_TOP, PanelAnchor.TOP),
        (ANCHOR_BOTTOM, PanelAnchor.BOTTOM),
    ):
        if bits & flag:
            return anchor
    raise ValueError("Invalid Anchor")


_OPPOSITE_BITS = {
    PanelAnchor.LEFT: ANCHOR_RIGHT,
    PanelAnchor.RIGHT: ANCHOR_LEFT,
    PanelAnchor.TOP: ANCHOR_BOTTOM,
    PanelAnchor.BOTTOM: ANCHOR_TOP,
}


def anchor_to_bits(anchor: PanelAnchor) -> int:
    """Layer-shell anchor bits: every edge except the opposite one."""
    return ANCHOR_ALL & ~_OPPOSITE_BITS[anchor]


class PanelSize(enum.Enum):
    """Configurable panel size."""

    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"

    def __str__(self) -> str:
        return self.value

    def get_applet_icon_size(self, is_symbolic: bool) -> int:
        """Applet icon dimension in pixels."""
        table = _SYMBOLIC_ICON if is_symbolic else _ICON
        return table[self]

    def get_applet_padding(self, is_symbolic: bool) -> int:
        """Padding around an applet icon in pixels."""
        table = _SYMBOLIC_PADDING if is_symbolic else _PADDING
        return table[self]

    def get_applet_icon_size_with_padding(self, is_symbolic: bool) -> int:
        """Icon dimension with padding on both sides."""
        return self.get_applet_icon_size(is_symbolic) + 2 * self.get_applet_padding(is_symbolic)


_SYMBOLIC_ICON = {PanelSize.XS: 16, PanelSize.S: 20, PanelSize.M: 28, PanelSize.L: 32, PanelSize.XL: 48}
_ICON = {PanelSize.XS: 24, PanelSize.S: 32, PanelSize.M: 40, PanelSize.L: 48, PanelSize.XL: 56}
_SYMBOLIC_PADDING = {PanelSize.XS: 8, PanelSize.S: 10, PanelSize.M: 14, PanelSize.L: 16, PanelSize.XL: 16}
_PADDING = {PanelSize.XS: 4, PanelSize.S: 4, PanelSize.M: 8, PanelSize.L: 8, PanelSize.XL: 12}
_BAR_END = {PanelSize.XS: 61, PanelSize.S: 81, PanelSize.M: 101, PanelSize.L: 121, PanelSize.XL: 141}
_BAR_START = 8


def parse_size(text: str) -> PanelSize:
    """Parse a panel size from its display name."""
    try:
        return PanelSize(text)
    except ValueError:
        raise ValueError("Not a valid PanelSize") from None


class BackgroundKind(enum.Enum):
    """Kind of panel background."""

    THEME_DEFAULT = "ThemeDefault"
    DARK = "Dark"
    LIGHT = "Light"
    COLOR = "Color"


@dataclass(frozen=True)
class CosmicPanelBackground:
    """Panel background; ``color`` is an RGB triple for the COLOR kind."""

    kind: BackgroundKind = BackgroundKind.THEME_DEFAULT
    color: Optional[Tuple[float, float, float]] = None

    def __post_init__(self) -> None:
        if self.kind is BackgroundKind.COLOR:
            if self.color is None or len(self.color) != 3:
                raise ValueError("a color background needs three components")
            object.__setattr__(self, "color", tuple(float(c) for c in self.color))
        elif self.color is not None:
            raise ValueError(f"{self.kind.value} background takes no color")


@dataclass(frozen=True)
class AutoHide:
    """Autohide timings in milliseconds and handle size in pixels."""

    wait_time: int = 1000
    transition_time: int = 200
    handle_size: int = 4


class OutputKind(enum.Enum):
    """Which output the panel is shown on."""

    ALL = "All"
    ACTIVE = "Active"
    NAME = "Name"


@dataclass(frozen=True)
class CosmicPanelOutput:
    """Output placement; ``name`` is set only for the NAME kind."""

    kind: OutputKind = OutputKind.ALL
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind is OutputKind.NAME) != (self.name is not None):
            raise ValueError("an output name goes with the Name kind only")

    def __str__(self) -> str:
        if self.kind is OutputKind.NAME:
            return f"Name({self.name})"
        return self.kind.value

    def to_wrapper_output(self) -> WrapperOutput:
        """Outputs in the form the surface wrapper uses."""
        if self.kind is OutputKind.ALL:
            return WrapperOutput()
        if self.kind is OutputKind.ACTIVE:
            return WrapperOutput(())
        return WrapperOutput((self.name,))


def parse_output(text: str) -> CosmicPanelOutput:
    """Parse ``All``, ``Active`` or ``Name(<output>)``."""
    if text == "All":
        return CosmicPanelOutput(OutputKind.ALL)
    if text == "Active":
        return CosmicPanelOutput(OutputKind.ACTIVE)
    if len(text) >= 6 and text.startswith("Name(") and text.endswith(")"):
        return CosmicPanelOutput(OutputKind.NAME, text[5:-1])
    raise ValueError("Failed to parse output.")


class Side(enum.Enum):
    """Region of the panel an applet sits in."""

    WING_START = "WingStart"
    CENTER = "Center"
    WING_END = "WingEnd"


_REQUIRED_FIELDS = (
    "name",
    "anchor",
    "anchor_gap",
    "layer",
    "keyboard_interactivity",
    "size",
    "output",
    "background",
    "expand_to_edges",
    "padding",
    "spacing",
    "border_radius",
    "exclusive_zone",
    "margin",
    "opacity",
)
_OPTIONAL_FIELDS = (
    "plugins_wings",
    "plugins_center",
    "size_wings",
    "size_center",
    "autohide",
    "autohover_delay_ms",
)


@dataclass(eq=False)
class CosmicPanelConfig:
    """Settings of one panel profile."""

    name: str = ""
    anchor: PanelAnchor = PanelAnchor.TOP
    anchor_gap: bool = False
    layer: Layer = Layer.TOP
    keyboard_interactivity: KeyboardInteractivity = KeyboardInteractivity.NONE
    size: PanelSize = PanelSize.M
    output: CosmicPanelOutput = field(default_factory=CosmicPanelOutput)
    background: CosmicPanelBackground = field(default_factory=CosmicPanelBackground)
    plugins_wings: Optional[Tuple[List[str], List[str]]] = None
    plugins_center: Optional[List[str]] = None
    size_wings: Optional[Tuple[Optional[PanelSize], Optional[PanelSize]]] = None
    size_center: Optional[PanelSize] = None
    expand_to_edges: bool = True
    padding: int = 4
    spacing: int = 4
    border_radius: int = 8
    exclusive_zone: bool = True
    autohide: Optional[AutoHide] = field(default_factory=AutoHide)
    margin: int = 4
    opacity: float = 0.8
    autohover_delay_ms: Optional[int] = 500

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CosmicPanelConfig):
            return NotImplemented
        same = all(
            getattr(self, name) == getattr(other, name)
            for name in _REQUIRED_FIELDS + _OPTIONAL_FIELDS
            if name not in ("opacity", "autohover_delay_ms")
        )
        return same and abs(self.opacity - other.opacity) < 0.01

    def get_effective_applet_size(self, side: Side) -> PanelSize:
        """Applet size for a side, honouring per-side overrides."""
        if side is Side.CENTER:
            return self.size_center or self.size
        if self.size_wings is not None:
            start, end = self.size_wings
            chosen = start if side is Side.WING_START else end
            if chosen is not None:
                return chosen
        return self.size

    def get_applet_icon_size(self, is_symbolic: bool) -> int:
        """Applet icon dimension for the panel size."""
        return self.size.get_applet_icon_size(is_symbolic)

    def get_applet_padding(self, is_symbolic: bool) -> int:
        """Applet padding for the panel size."""
        return self.size.get_applet_padding(is_symbolic)

    def _priority(self, no_autohide_bonus: int) -> int:
        priority = 10000 if self.expand_to_edges else 0
        if self.autohide is None:
            priority += no_autohide_bonus
        if self.margin == 0:
            priority += 200
        if not self.anchor_gap:
            priority += 100
        if "panel" in self.name.lower():
            priority += 10
        return priority

    def get_priority(self) -> int:
        """Higher priority panels are created first and get more space."""
        return self._priority(1000)

    def get_stack_priority(self) -> int:
        """Stacking priority, in which lacking autohide weighs most."""
        return self._priority(100000)

    def get_effective_anchor_gap(self) -> int:
        """Gap to the anchored edge: the margin when a gap is wanted."""
        return self.margin if self.anchor_gap else 0

    def get_hide_wait(self) -> Optional[timedelta]:
        """Wait before hiding, if autohide is on."""
        if self.autohide is None:
            return None
        return timedelta(milliseconds=self.autohide.wait_time)

    def get_hide_transition(self) -> Optional[timedelta]:
        """Length of the hide/show transition, if autohide is on."""
        if self.autohide is None:
            return None
        return timedelta(milliseconds=self.autohide.transition_time)

    def get_hide_handle(self) -> Optional[int]:
        """Size of the exposed handle, if autohide is on."""
        return None if self.autohide is None else self.autohide.handle_size

    def effective_exclusive_zone(self) -> bool:
        """Whether the panel reserves space; always so without autohide."""
        return self.exclusive_zone or self.autohide is None

    def plugins_left(self) -> Optional[List[str]]:
        """Plugins of the start wing."""
        return None if self.plugins_wings is None else list(self.plugins_wings[0])

    def plugins_right(self) -> Optional[List[str]]:
        """Plugins of the end wing."""
        return None if self.plugins_wings is None else list(self.plugins_wings[1])

    def is_horizontal(self) -> bool:
        """Whether the panel lies along the top or bottom edge."""
        return self.anchor in (PanelAnchor.TOP, PanelAnchor.BOTTOM)

    def bg_color_override(self) -> Optional[Tuple[float, float, float, float]]:
        """RGBA colour for a custom background, else None."""
        if self.background.kind is not BackgroundKind.COLOR:
            return None
        r, g, b = self.background.color
        return (r, g, b, self.opacity)

    def get_dimensions(
        self,
        output_dims: Optional[Tuple[int, int]] = None,
        suggested_length: Optional[int] = None,
        gap: Optional[int] = None,
    ) -> Tuple[range, range]:
        """Width and height constraints as half-open ranges."""
        if gap is None:
            gap = self.get_effective_anchor_gap()
        bar = range(_BAR_START + gap, _BAR_END[self.size] + gap)
        if not 2 * self.padding + gap < bar.stop:
            raise ValueError("padding and gap do not fit in the panel thickness")
        width, height = output_dims if output_dims is not None else (0, 0)
        if suggested_length is not None:
            width = height = suggested_length
        if self.is_horizontal():
            return range(width, width + 1), bar
        return bar, range(height, height + 1)

    def maximize(self) -> None:
        """Make the panel opaque and, without autohide, edge to edge."""
        self.opacity = 1.0
        if self.autohide is not None:
            return
        self.expand_to_edges = True
        self.margin = 0
        self.border_radius = 0
        self.anchor_gap = False

    def outputs(self) -> WrapperOutput:
        """Outputs the panel is shown on."""
        return self.output.to_wrapper_output()

    def to_dict(self) -> Dict[str, Any]:
        """Plain data form of the configuration."""
        if self.background.kind is BackgroundKind.COLOR:
            background: Any = {"Color": list(self.background.color)}
        else:
            background = self.background.kind.value
        if self.output.kind is OutputKind.NAME:
            output: Any = {"Name": self.output.name}
        else:
            output = self.output.kind.value
        return {
            "name": self.name,
            "anchor": self.anchor.value,
            "anchor_gap": self.anchor_gap,
            "layer": self.layer.value,
            "keyboard_interactivity": self.keyboard_interactivity.value,
            "size": self.size.value,
            "output": output,
            "background": background,
            "plugins_wings": None
            if self.plugins_wings is None
            else [list(self.plugins_wings[0]), list(self.plugins_wings[1])],
            "plugins_center": None if self.plugins_center is None else list(self.plugins_center),
            "size_wings": None
            if self.size_wings is None
            else [s.value if s is not None else None for s in self.size_wings],
            "size_center": None if self.size_center is None else self.size_center.value,
            "expand_to_edges": self.expand_to_edges,
            "padding": self.padding,
            "spacing": self.spacing,
            "border_radius": self.border_radius,
            "exclusive_zone": self.exclusive_zone,
            "autohide": None
            if self.autohide is None
            else {
                "wait_time": self.autohide.wait_time,
                "transition_time": self.autohide.transition_time,
                "handle_size": self.autohide.handle_size,
            },
            "margin": self.margin,
            "opacity": self.opacity,
            "autohover_delay_ms": self.autohover_delay_ms,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CosmicPanelConfig":
        """Build a configuration from its plain data form."""
        unknown = set(data) - set(_REQUIRED_FIELDS) - set(_OPTIONAL_FIELDS)
        if unknown:
            raise ValueError(f"unknown fields: {', '.join(sorted(unknown))}")
        missing = [name for name in _REQUIRED_FIELDS if name not in data]
        if missing:
            raise ValueError(f"missing fields: {', '.join(missing)}")

        wings = data.get("plugins_wings")
        if wings is not None:
            start, end = _pair(wings, "plugins_wings")
            wings = (list(start), list(end))
        center = data.get("plugins_center")
        size_wings = data.get("size_wings")
        if size_wings is not None:
            start, end = _pair(size_wings, "size_wings")
            size_wings = (
                None if start is None else _enum(PanelSize, start, "size_wings"),
                None if end is None else _enum(PanelSize, end, "size_wings"),
            )
        size_center = data.get("size_center")
        delay = data.get("autohover_delay_ms")
        return cls(
            name=str(data["name"]),
            anchor=_enum(PanelAnchor, data["anchor"], "anchor"),
            anchor_gap=bool(data["anchor_gap"]),
            layer=_enum(Layer, data["layer"], "layer"),
            keyboard_interactivity=_enum(
                KeyboardInteractivity, data["keyboard_interactivity"], "keyboard_interactivity"
            ),
            size=_enum(PanelSize, data["size"], "size"),
            output=_output_from_data(data["output"]),
            background=_background_from_data(data["background"]),
            plugins_wings=wings,
            plugins_center=None if center is None else list(center),
            size_wings=size_wings,
            size_center=None if size_center is None else _enum(PanelSize, size_center, "size_center"),
            expand_to_edges=bool(data["expand_to_edges"]),
            padding=int(data["padding"]),
            spacing=int(data["spacing"]),
            border_radius=int(data["border_radius"]),
            exclusive_zone=bool(data["exclusive_zone"]),
            autohide=_autohide_from_data(data.get("autohide")),
            margin=int(data["margin"]),
            opacity=float(data["opacity"]),
            autohover_delay_ms=None if delay is None else int(delay),
        )


def _enum(enum_cls: type, value: Any, field_name: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"invalid {field_name}: {value!r}") from None


def _pair(value: Any, field_name: str) -> Tuple[Any, Any]:
    items = list(value)
    if len(items) != 2:
        raise ValueError(f"{field_name} must hold two items")
    return items[0], items[1]


def _output_from_data(value: Any) -> CosmicPanelOutput:
    if isinstance(value, dict):
        if set(value) != {"Name"}:
            raise ValueError(f"invalid output: {value!r}")
        return CosmicPanelOutput(OutputKind.NAME, str(value["Name"]))
    kind = _enum(OutputKind, value, "output")
    if kind is OutputKind.NAME:
        raise ValueError("a Name output needs an output name")
    return CosmicPanelOutput(kind)


def _background_from_data(value: Any) -> CosmicPanelBackground:
    if isinstance(value, dict):
        if set(value) != {"Color"}:
            raise ValueError(f"invalid background: {value!r}")
        return CosmicPanelBackground(BackgroundKind.COLOR, tuple(value["Color"]))
    kind = _enum(BackgroundKind, value, "background")
    if kind is BackgroundKind.COLOR:
        raise ValueError("a Color background needs a color")
    return CosmicPanelBackground(kind)


def _autohide_from_data(value: Any) -> Optional[AutoHide]:
    if value is None:
        return None
    expected = {"wait_time", "transition_time", "handle_size"}
    if set(value) != expected:
        raise ValueError(f"invalid autohide: {value!r}")
    return AutoHide(
        wait_time=int(value["wait_time"]),
        transition_time=int(value["transition_time"]),
        handle_size=int(value["handle_size"]),
    )