"""The list of panel profiles and the key-value store they live in."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, List, Optional, Sequence

from panelconf.panel import (
    AutoHide,
    CosmicPanelBackground,
    CosmicPanelConfig,
    CosmicPanelOutput,
    OutputKind,
    PanelAnchor,
    PanelSize,
)
from panelconf.wrapper import KeyboardInteractivity, Layer, WrapperOutput

NAME = "com.system76.CosmicPanel"
VERSION = 1
SYSTEM_CONFIG_ROOT = Path("/usr/share/cosmic")


class ConfigError(Exception):
    """A configuration value could not be read or written."""


class ConfigLoadError(Exception):
    """Loading failed in part; ``config`` holds what could be loaded."""

    def __init__(self, errors: Sequence[ConfigError], config: Any) -> None:
        self.errors = list(errors)
        self.config = config
        detail = "; ".join(str(e) for e in self.errors)
        super().__init__(f"{len(self.errors)} configuration error(s): {detail}")


def _check_component(text: str, what: str) -> None:
    if not text or "/" in text or text in (".", ".."):
        raise ConfigError(f"invalid {what}: {text!r}")


@dataclass(frozen=True)
class ConfigStore:
    """Versioned key-value configuration kept as one JSON file per key."""

    root: Path
    name: str = NAME
    version: int = VERSION
    system_root: Optional[Path] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))
        if self.system_root is not None:
            object.__setattr__(self, "system_root", Path(self.system_root))
        _check_component(self.name, "configuration name")

    @property
    def directory(self) -> Path:
        """Directory holding this store's keys."""
        return self.root / self.name / f"v{self.version}"

    def get(self, key: str) -> Any:
        """Read the value stored under ``key``."""
        _check_component(key, "key")
        path = self.directory / key
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigError(f"{self.name}: no value for {key!r}") from None
        except OSError as exc:
            raise ConfigError(f"{self.name}: cannot read {key!r}: {exc}") from exc
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{self.name}: invalid value for {key!r}: {exc}") from exc

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        _check_component(key, "key")
        try:
            text = json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"{self.name}: cannot store {key!r}: {exc}") from exc
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            (self.directory / key).write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"{self.name}: cannot write {key!r}: {exc}") from exc

    def entry(self, name: str) -> "ConfigStore":
        """Store of the sub-configuration called ``name``."""
        _check_component(name, "entry name")
        return ConfigStore(self.root, f"{self.name}.{name}", self.version, self.system_root)

    def _system(self) -> "ConfigStore":
        if self.system_root is None:
            return self
        return ConfigStore(self.system_root, self.name, self.version, None)


def _user_store() -> ConfigStore:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    store = ConfigStore(Path(base) / "cosmic", NAME, VERSION, SYSTEM_CONFIG_ROOT)
    try:
        store.directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigError(f"cannot create configuration directory: {exc}") from exc
    return store


_PANEL_FIELDS = tuple(f.name for f in fields(CosmicPanelConfig))


def read_panel_entry(store: ConfigStore) -> CosmicPanelConfig:
    """Read one panel profile; unreadable fields fall back to defaults.

    Raises ConfigLoadError holding the partly read profile if any field failed.
    """
    data = CosmicPanelConfig().to_dict()
    errors: List[ConfigError] = []
    for key in _PANEL_FIELDS:
        try:
            value = store.get(key)
        except ConfigError as exc:
            errors.append(exc)
            continue
        trial = dict(data)
        trial[key] = value
        try:
            CosmicPanelConfig.from_dict(trial)
        except (ValueError, TypeError) as exc:
            errors.append(ConfigError(f"{store.name}: invalid value for {key!r}: {exc}"))
            continue
        data = trial
    config = CosmicPanelConfig.from_dict(data)
    if errors:
        raise ConfigLoadError(errors, config)
    return config


def write_panel_entry(config: CosmicPanelConfig, store: ConfigStore) -> None:
    """Write every field of a panel profile to the store."""
    for key, value in config.to_dict().items():
        store.set(key, value)


def default_container_config() -> "CosmicPanelContainerConfig":
    """The stock panel and dock."""
    panel = CosmicPanelConfig(
        name="Panel",
        anchor=PanelAnchor.TOP,
        anchor_gap=False,
        layer=Layer.TOP,
        keyboard_interactivity=KeyboardInteractivity.ON_DEMAND,
        size=PanelSize.XS,
        output=CosmicPanelOutput(OutputKind.ALL),
        background=CosmicPanelBackground(),
        plugins_wings=(
            [
                "com.system76.CosmicPanelWorkspacesButton",
                "com.system76.CosmicPanelAppButton",
            ],
            [
                "com.system76.CosmicAppletInputSources",
                "com.system76.CosmicAppletStatusArea",
                "com.system76.CosmicAppletTiling",
                "com.system76.CosmicAppletAudio",
                "com.system76.CosmicAppletNetwork",
                "com.system76.CosmicAppletBattery",
                "com.system76.CosmicAppletNotifications",
                "com.system76.CosmicAppletBluetooth",
                "com.system76.CosmicAppletPower",
            ],
        ),
        plugins_center=["com.system76.CosmicAppletTime"],
        size_wings=None,
        size_center=None,
        expand_to_edges=True,
        padding=0,
        spacing=2,
        border_radius=0,
        exclusive_zone=True,
        autohide=None,
        margin=0,
        opacity=1.0,
        autohover_delay_ms=500,
    )
    dock = CosmicPanelConfig(
        name="Dock",
        anchor=PanelAnchor.BOTTOM,
        anchor_gap=False,
        layer=Layer.TOP,
        keyboard_interactivity=KeyboardInteractivity.ON_DEMAND,
        size=PanelSize.L,
        output=CosmicPanelOutput(OutputKind.ALL),
        background=CosmicPanelBackground(),
        plugins_wings=None,
        plugins_center=[
            "com.system76.CosmicPanelLauncherButton",
            "com.system76.CosmicPanelWorkspacesButton",
            "com.system76.CosmicPanelAppButton",
            "com.system76.CosmicAppList",
            "com.system76.CosmicAppletMinimize",
        ],
        size_wings=None,
        size_center=None,
        expand_to_edges=False,
        padding=0,
        spacing=4,
        border_radius=160,
        exclusive_zone=False,
        autohide=AutoHide(wait_time=500, transition_time=200, handle_size=2),
        margin=0,
        opacity=1.0,
        autohover_delay_ms=500,
    )
    return CosmicPanelContainerConfig([panel, dock])


@dataclass
class CosmicPanelContainerConfig:
    """All configured panels."""

    config_list: List[CosmicPanelConfig] = field(default_factory=list)

    name: ClassVar[str] = "Cosmic Panel Config"

    def outputs(self) -> WrapperOutput:
        """Union of the outputs of every panel."""
        combined = WrapperOutput(())
        for config in self.config_list:
            combined = combined.merge(config.outputs())
        return combined

    def configs_for_output(self, output_name: str) -> List[CosmicPanelConfig]:
        """Panels shown on the named output, highest priority first."""
        matching = [
            c
            for c in self.config_list
            if c.output.kind is OutputKind.ALL
            or (c.output.kind is OutputKind.NAME and c.output.name == output_name)
        ]
        return sorted(matching, key=lambda c: c.get_priority(), reverse=True)

    @classmethod
    def load(cls, store: Optional[ConfigStore] = None) -> "CosmicPanelContainerConfig":
        """Load the panels from ``store`` or the user's configuration."""
        if store is None:
            try:
                store = _user_store()
            except ConfigError as exc:
                raise ConfigLoadError([exc], default_container_config()) from exc
        return cls.load_from_store(store, False)

    @classmethod
    def load_from_store(cls, store: ConfigStore, system: bool = False) -> "CosmicPanelContainerConfig":
        """Load the panels listed under ``entries``.

        With ``system`` set, the panel entries are read from the system store.
        Raises ConfigLoadError with whatever could be loaded on failure.
        """
        try:
            names = store.get("entries")
        except ConfigError as exc:
            raise ConfigLoadError([exc], default_container_config()) from exc
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            error = ConfigError(f"{store.name}: entries must be a list of names")
            raise ConfigLoadError([error], default_container_config())

        base = store._system() if system else store
        config_list: List[CosmicPanelConfig] = []
        errors: List[ConfigError] = []
        for entry_name in names:
            try:
                entry_store = base.entry(entry_name)
            except ConfigError as exc:
                errors.append(exc)
                continue
            try:
                config_list.append(read_panel_entry(entry_store))
            except ConfigLoadError as exc:
                config_list.append(exc.config)
                errors.extend(exc.errors)
        loaded = cls(config_list)
        if errors:
            raise ConfigLoadError(errors, loaded)
        return loaded

    def write_entries(self, store: Optional[ConfigStore] = None) -> None:
        """Write the entry list and every panel profile."""
        if store is None:
            store = _user_store()
        store.set("entries", [c.name for c in self.config_list])
        for config in self.config_list:
            write_panel_entry(config, store.entry(config.name))