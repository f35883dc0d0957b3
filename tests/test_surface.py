import pytest

from panelconf.surface import (
    CommitRole,
    Dirty,
    ProxiedLayerSurfaces,
    Waiting,
    WaitingFirst,
    commit_layer_size,
    commit_role,
    exclusive_zone_value,
)


@pytest.mark.parametrize(
    "name, role",
    [
        ("xdg_toplevel", CommitRole.XDG_TOPLEVEL),
        ("xdg_popup", CommitRole.XDG_POPUP),
        ("zwlr_layer_surface_v1", CommitRole.LAYER_SURFACE),
        ("dnd_icon", CommitRole.DND_ICON),
        ("subsurface", CommitRole.SUBSURFACE),
    ],
)
def test_known_roles(name, role):
    assert commit_role(name) is role


@pytest.mark.parametrize("name", [None, "", "cursor_image", "XDG_TOPLEVEL"])
def test_unknown_roles(name):
    assert commit_role(name) is CommitRole.OTHER


def test_exclusive_zone_values():
    assert exclusive_zone_value(32) == 32
    assert exclusive_zone_value("Neutral") == 0
    assert exclusive_zone_value("DontCare") == -1


@pytest.mark.parametrize("zone", ["Exclusive", -5, True, 1.5])
def test_exclusive_zone_invalid(zone):
    with pytest.raises(ValueError):
        exclusive_zone_value(zone)


def test_empty_size_is_ignored():
    state = Waiting(2, (10, 10))
    assert commit_layer_size(state, (10, 10), (0, 10)) == (state, False)
    assert commit_layer_size(state, (10, 10), (10, -1)) == (state, False)


def test_waiting_first_is_kept():
    state = WaitingFirst(0, (0, 0))
    assert commit_layer_size(state, (5, 5), (20, 20)) == (state, False)


def test_same_size_marks_dirty():
    new_state, resized = commit_layer_size(Waiting(7, (30, 40)), (30, 40), (30, 40))
    assert new_state == Dirty(7)
    assert resized is False


def test_resize_from_empty_marks_dirty():
    new_state, resized = commit_layer_size(Waiting(3, (0, 0)), (0, 0), (30, 40))
    assert new_state == Dirty(3)
    assert resized is True


def test_resize_bumps_generation():
    new_state, resized = commit_layer_size(Dirty(0), (30, 40), (50, 40))
    assert new_state == Waiting(1, (50, 40))
    assert resized is True


def test_generation_wraps():
    new_state, _ = commit_layer_size(Dirty(0xFFFFFFFF), (30, 40), (50, 40))
    assert new_state == Waiting(0, (50, 40))


def test_proxied_scale_lookup():
    surfaces = ProxiedLayerSurfaces()
    surfaces.add("a", 1.5)
    assert "a" in surfaces
    assert surfaces.preferred_scale("a", 2.0) == 1.5
    assert surfaces.preferred_scale("b", 2.0) == 2.0
    assert surfaces.preferred_scale("b") == 1.0


def test_proxied_add_updates_and_remove():
    surfaces = ProxiedLayerSurfaces()
    surfaces.add("a")
    surfaces.add("b", 2.0)
    surfaces.add("a", 1.25)
    assert len(surfaces) == 2
    assert surfaces.preferred_scale("a") == 1.25
    assert surfaces.remove("a") is True
    assert surfaces.remove("a") is False
    assert list(surfaces) == ["b"]


def test_proxied_rejects_bad_scale():
    surfaces = ProxiedLayerSurfaces()
    with pytest.raises(ValueError):
        surfaces.add("a", 0)
    assert len(surfaces) == 0