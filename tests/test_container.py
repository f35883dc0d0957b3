import pytest

from panelconf.container import (
    NAME,
    ConfigError,
    ConfigLoadError,
    ConfigStore,
    CosmicPanelContainerConfig,
    default_container_config,
    read_panel_entry,
    write_panel_entry,
)
from panelconf.panel import (
    AutoHide,
    CosmicPanelConfig,
    CosmicPanelOutput,
    OutputKind,
    PanelAnchor,
    PanelSize,
)
from panelconf.wrapper import WrapperOutput


@pytest.fixture
def store(tmp_path):
    return ConfigStore(tmp_path / "user", system_root=tmp_path / "system")


def test_store_round_trip(store):
    store.set("entries", ["a", "b"])
    assert store.get("entries") == ["a", "b"]


def test_store_missing_key(store):
    with pytest.raises(ConfigError):
        store.get("missing")


def test_store_invalid_json(store):
    store.directory.mkdir(parents=True)
    (store.directory / "broken").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        store.get("broken")


def test_entry_name(store):
    assert store.entry("Dock").name == f"{NAME}.Dock"


def test_entry_rejects_bad_name(store):
    with pytest.raises(ConfigError):
        store.entry("a/b")


def test_default_container():
    config = default_container_config()
    assert [c.name for c in config.config_list] == ["Panel", "Dock"]
    dock = config.config_list[1]
    assert dock.autohide == AutoHide(wait_time=500, transition_time=200, handle_size=2)
    assert dock.size is PanelSize.L
    assert dock.anchor is PanelAnchor.BOTTOM
    assert config.config_list[0].plugins_center == ["com.system76.CosmicAppletTime"]


def test_name():
    assert default_container_config().name == "Cosmic Panel Config"


def test_panel_entry_round_trip(store):
    original = default_container_config().config_list[0]
    entry = store.entry("Panel")
    write_panel_entry(original, entry)
    assert read_panel_entry(entry) == original


def test_panel_entry_partial(store):
    entry = store.entry("Partial")
    entry.set("name", "Partial")
    entry.set("size", "XL")
    with pytest.raises(ConfigLoadError) as info:
        read_panel_entry(entry)
    config = info.value.config
    assert config.name == "Partial"
    assert config.size is PanelSize.XL
    assert config.padding == CosmicPanelConfig().padding
    assert len(info.value.errors) == len(CosmicPanelConfig().to_dict()) - 2


def test_panel_entry_invalid_field_falls_back(store):
    original = CosmicPanelConfig(name="X")
    entry = store.entry("X")
    write_panel_entry(original, entry)
    entry.set("size", "HUGE")
    with pytest.raises(ConfigLoadError) as info:
        read_panel_entry(entry)
    assert info.value.config.size is CosmicPanelConfig().size
    assert len(info.value.errors) == 1


def test_write_and_load(store):
    config = default_container_config()
    config.write_entries(store)
    assert store.get("entries") == ["Panel", "Dock"]
    loaded = CosmicPanelContainerConfig.load_from_store(store, False)
    assert loaded.config_list == config.config_list


def test_load_with_store(store):
    config = default_container_config()
    config.write_entries(store)
    assert CosmicPanelContainerConfig.load(store).config_list == config.config_list


def test_load_without_entries_falls_back(store):
    with pytest.raises(ConfigLoadError) as info:
        CosmicPanelContainerConfig.load_from_store(store, False)
    assert info.value.config.config_list == default_container_config().config_list


def test_load_collects_entry_errors(store):
    store.set("entries", ["Ghost"])
    with pytest.raises(ConfigLoadError) as info:
        CosmicPanelContainerConfig.load_from_store(store, False)
    assert [c.name for c in info.value.config.config_list] == [""]
    assert info.value.errors


def test_load_system_entries(tmp_path):
    user = ConfigStore(tmp_path / "user", system_root=tmp_path / "system")
    system = ConfigStore(tmp_path / "system")
    dock = default_container_config().config_list[1]
    write_panel_entry(dock, system.entry("Dock"))
    user.set("entries", ["Dock"])
    loaded = CosmicPanelContainerConfig.load_from_store(user, True)
    assert loaded.config_list == [dock]
    with pytest.raises(ConfigLoadError):
        CosmicPanelContainerConfig.load_from_store(user, False)


def test_configs_for_output_order():
    config = default_container_config()
    config.config_list.reverse()
    assert [c.name for c in config.configs_for_output("DP-1")] == ["Panel", "Dock"]


def test_configs_for_output_filters():
    named = CosmicPanelConfig(name="a", output=CosmicPanelOutput(OutputKind.NAME, "HDMI-1"))
    active = CosmicPanelConfig(name="b", output=CosmicPanelOutput(OutputKind.ACTIVE))
    config = CosmicPanelContainerConfig([named, active])
    assert config.configs_for_output("HDMI-1") == [named]
    assert config.configs_for_output("DP-1") == []


def test_outputs_all():
    assert default_container_config().outputs() == WrapperOutput()


def test_outputs_named():
    config = CosmicPanelContainerConfig(
        [
            CosmicPanelConfig(name="a", output=CosmicPanelOutput(OutputKind.NAME, "HDMI-1")),
            CosmicPanelConfig(name="b", output=CosmicPanelOutput(OutputKind.ACTIVE)),
            CosmicPanelConfig(name="c", output=CosmicPanelOutput(OutputKind.NAME, "DP-1")),
        ]
    )
    assert config.outputs() == WrapperOutput(("HDMI-1", "DP-1"))


def test_outputs_empty():
    assert CosmicPanelContainerConfig().outputs() == WrapperOutput(())