# panelconf

A pure-Python model of a desktop panel and dock configuration, together with
the small pieces of state bookkeeping a layer-shell panel needs. It has no
dependencies beyond the standard library.

## Modules

- `panelconf.wrapper`: `Layer`, `KeyboardInteractivity`, `WrapperOutput`
  (a set of named outputs, or every output when `names` is `None`; combine
  two with `merge`) and the `WrapperConfig` protocol.
- `panelconf.panel`: one panel's settings, `CosmicPanelConfig`, with
  `PanelAnchor`, `PanelSize`, `CosmicPanelBackground`, `AutoHide`,
  `CosmicPanelOutput` and `Side`. It computes priorities
  (`get_priority`, `get_stack_priority`), applet sizes, autohide timings as
  `timedelta`, dimension constraints as half-open `range`s
  (`get_dimensions`) and `maximize`. Text is parsed with `parse_anchor`,
  `parse_size` and `parse_output` (`All`, `Active` or `Name(<output>)`);
  layer-shell anchor bits are converted with `anchor_from_bits` and
  `anchor_to_bits`. `to_dict` and `from_dict` give a plain-data round trip;
  `from_dict` rejects unknown or missing fields with `ValueError`.
- `panelconf.container`: `CosmicPanelContainerConfig`, the list of all
  panels, with `configs_for_output`, `outputs`, `load`, `load_from_store`
  and `write_entries`; `default_container_config()` gives the stock panel
  and dock. Settings live in a `ConfigStore`, which keeps one JSON file per
  key under `<root>/<name>/v<version>/`. `read_panel_entry` and
  `write_panel_entry` handle a single profile.
- `panelconf.util`: `smootherstep` easing clamped to [0, 1], and
  `copy_shm_rows` to cut rows out of a shared-memory buffer.
- `panelconf.space`: space events (`WaitConfigure`, `Quit`), visibility
  states (`Hidden`, `Visible`, `TransitionToHidden`,
  `TransitionToVisible`), `Rectangle`, `scaled_size`, `PanelPopup` with
  `apply_pending_state`, `PanelSubsurface` with `handle_events`, and
  `ServerPointerFocus`.
- `panelconf.surface`: surface roles (`commit_role`, `CommitRole`),
  `exclusive_zone_value`, the proxied layer surface state machine
  (`WaitingFirst`, `Waiting`, `Dirty`, `commit_layer_size`) and
  `ProxiedLayerSurfaces`, which tracks surfaces and their scale factors.
- `panelconf.handlers`: `DndAction` and `convert_dnd_actions`, and
  `PressedKeys` / `KeyPress` / `release_time` for releasing keys whose
  surface has gone away.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from panelconf.container import default_container_config

container = default_container_config()
for config in container.configs_for_output("DP-1"):
    print(config.name, config.anchor, config.get_priority())

panel = container.config_list[0]
print(panel.is_horizontal())
print(panel.get_dimensions((1920, 1080), None, None))
```

Panels for an output are sorted by priority, highest first: a panel that
stretches to the output edges, has no autohide, no margin and no anchor gap
ranks above a floating dock.

Saving and loading through a store:

```python
from pathlib import Path
from panelconf.container import (
    ConfigLoadError, ConfigStore, CosmicPanelContainerConfig, default_container_config,
)

store = ConfigStore(Path("/tmp/panel-settings"))
default_container_config().write_entries(store)

try:
    container = CosmicPanelContainerConfig.load_from_store(store)
except ConfigLoadError as exc:
    container = exc.config   # whatever could be read, defaults elsewhere
    print(exc.errors)
```

`load()` without a store reads from `$XDG_CONFIG_HOME/cosmic` (or
`~/.config/cosmic`); with `system=True`, `load_from_store` reads the panel
entries from the store's `system_root`.

## What it does not do

There is no command to run and no running panel. The package does not
connect to a display server, create layer surfaces, render, or handle input
events; `panelconf.space`, `panelconf.surface` and `panelconf.handlers` only
hold and update the state such a panel keeps, and leave talking to the
compositor to the caller.