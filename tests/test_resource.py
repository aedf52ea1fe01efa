#
# python-colord - Copyright (C) 2026 python-colord Developers
# LGPL-3.0-or-later
#

"""Unit tests for the Device and Profile handles."""

from __future__ import annotations

import pytest
from traitlets import TraitError

from colord.constants import DEVICE_INTERFACE, PROFILE_INTERFACE
from colord.device import Device
from colord.errors import (
    AlreadyBoundError,
    BindError,
    BusError,
    CancelledError,
    NotBoundError,
    PropertyError,
)
from colord.profile import Profile
from colord.types import DeviceKind, ProfileKind
from colord.util import Cancellable

from .conftest import FakeBus, PROFILE_BASE


@pytest.fixture
def bus():
    return FakeBus()


# ─────────────────────────────────────────────────────────────────────────────
# Binding
# ─────────────────────────────────────────────────────────────────────────────


class TestBind:
    """Tests for binding handles to object paths."""

    def test_unbound_handle(self):
        """A new handle is unbound and has no properties yet."""
        profile = Profile()

        assert not profile.bound
        assert profile.object_path is None
        with pytest.raises(NotBoundError):
            profile.filename  # noqa: B018

    def test_bind_populates_properties(self, bus):
        """bind() fetches every property in one round trip."""
        path = bus.add_profile("icc-1234", Qualifier="RGB.Plain.300dpi")
        profile = Profile()

        profile.bind(bus, path)

        assert profile.bound
        assert profile.object_path == path
        assert profile.profile_id == "icc-1234"
        assert profile.qualifier == "RGB.Plain.300dpi"
        assert profile.kind == ProfileKind.DISPLAY_DEVICE
        assert profile.is_system_wide is False
        assert bus.calls == [(path, "org.freedesktop.DBus.Properties", "GetAll",
                              (PROFILE_INTERFACE,), "(s)")]

    def test_bind_twice(self, bus):
        """A bound handle cannot be bound again."""
        path = bus.add_device("lvds1")
        device = Device.from_object_path(bus, path)

        with pytest.raises(AlreadyBoundError):
            device.bind(bus, bus.add_device("other"))

        assert device.object_path == path
        assert len(bus.calls) == 1

    def test_object_path_is_write_once(self, bus):
        """The object path trait itself refuses a second value."""
        device = Device.from_object_path(bus, bus.add_device("lvds1"))

        with pytest.raises(TraitError):
            device.object_path = "/somewhere/else"

    def test_cached_properties_are_read_only(self, bus):
        """Cached values cannot be assigned directly."""
        device = Device.from_object_path(bus, bus.add_device("lvds1"))

        with pytest.raises(TraitError):
            device.model = "changed"

    def test_bind_failure(self, bus):
        """A failed bind raises BindError and leaves the handle unbound."""
        device = Device()

        with pytest.raises(BindError) as excinfo:
            device.bind(bus, "/nowhere")

        assert "/nowhere" in str(excinfo.value)
        assert isinstance(excinfo.value.cause, BusError)
        assert not device.bound

    def test_bind_invalid_property(self, bus):
        """A wrongly typed property fails the bind before anything is cached."""
        path = bus.add_device("lvds1", Created="not-a-number")
        device = Device()

        with pytest.raises(BindError) as excinfo:
            device.bind(bus, path)

        assert "Created" in str(excinfo.value)
        assert isinstance(excinfo.value.cause, TraitError)
        assert not device.bound
        assert "model" not in device._trait_values

        device.bind(bus, bus.add_device("lvds2"))
        assert device.model == "Model lvds2"

    def test_bind_cancelled(self, bus):
        """A cancelled token stops the bind before any call."""
        token = Cancellable()
        token.cancel()

        with pytest.raises(CancelledError):
            Device.from_object_path(bus, bus.add_device("lvds1"), token)

        assert bus.calls == []

    def test_unknown_properties_ignored(self, bus):
        """Properties without a trait are skipped."""
        path = bus.add_device("lvds1", Metadata={"XRANDR_name": "LVDS1"}, Seat="seat0")

        device = Device.from_object_path(bus, path)

        assert device.device_id == "lvds1"

    def test_repr(self, bus):
        """repr() shows the object path."""
        path = bus.add_device("lvds1")
        assert repr(Device()) == "<Device unbound>"
        assert repr(Device.from_object_path(bus, path)) == "<Device %s>" % path


# ─────────────────────────────────────────────────────────────────────────────
# Device
# ─────────────────────────────────────────────────────────────────────────────


class TestDevice:
    """Tests for Device specific behavior."""

    def test_properties(self, bus):
        """Device properties are converted to Python types."""
        path = bus.add_device("hp-lj", kind="printer", Profiles=[PROFILE_BASE + "/a"])

        device = Device.from_object_path(bus, path)

        assert device.kind == DeviceKind.PRINTER
        assert device.vendor == "Acme"
        assert device.created == 1288185839
        assert device.profile_paths == [PROFILE_BASE + "/a"]

    def test_unknown_kind(self, bus):
        """Kinds from newer daemons map to UNKNOWN."""
        device = Device.from_object_path(bus, bus.add_device("holo", kind="hologram"))
        assert device.kind == DeviceKind.UNKNOWN

    def test_add_profile(self, bus):
        """add_profile() calls the device and refreshes it."""
        profile = Profile.from_object_path(bus, bus.add_profile("icc-1234"))
        path = bus.add_device("lvds1")
        device = Device.from_object_path(bus, path)
        bus.objects[path]["Profiles"] = [profile.object_path]

        device.add_profile(profile)

        assert (path, DEVICE_INTERFACE, "AddProfile", ("hard", profile.object_path), "(so)") \
            in bus.calls
        assert device.profile_paths == [profile.object_path]

    def test_remove_profile_failure(self, bus):
        """Daemon errors surface as PropertyError."""
        profile = Profile.from_object_path(bus, bus.add_profile("icc-1234"))
        device = Device.from_object_path(bus, bus.add_device("lvds1"))
        bus.replies["RemoveProfile"] = BusError("profile not found")

        with pytest.raises(PropertyError) as excinfo:
            device.remove_profile(profile)

        assert "profile not found" in str(excinfo.value)

    def test_set_property(self, bus):
        """set_property() writes through and updates the cache."""
        path = bus.add_device("lvds1")
        device = Device.from_object_path(bus, path)

        device.set_property("Model", "T61")

        assert bus.calls[-1] == (path, DEVICE_INTERFACE, "SetProperty", ("Model", "T61"), "(ss)")
        assert device.model == "T61"

    def test_refresh(self, bus):
        """refresh() picks up changed values."""
        path = bus.add_device("lvds1")
        device = Device.from_object_path(bus, path)
        bus.objects[path]["Mode"] = "virtual"

        device.refresh()

        assert device.mode == "virtual"

    def test_refresh_invalid_property(self, bus):
        """A bad value on refresh keeps every cached value."""
        path = bus.add_device("lvds1")
        device = Device.from_object_path(bus, path)
        bus.objects[path].update(Mode="virtual", Profiles=42)

        with pytest.raises(BindError):
            device.refresh()

        assert device.mode == "physical"
        assert device.profile_paths == []

    def test_str(self, bus):
        """str() summarizes the device."""
        path = bus.add_device("lvds1")
        device = Device.from_object_path(bus, path)
        assert str(device) == "lvds1 (display) Acme Model lvds1 [%s]" % path

    def test_methods_require_bind(self):
        """Calls on an unbound device are precondition errors."""
        with pytest.raises(NotBoundError):
            Device().refresh()


# ─────────────────────────────────────────────────────────────────────────────
# Profile
# ─────────────────────────────────────────────────────────────────────────────


class TestProfile:
    """Tests for Profile specific behavior."""

    def test_set_qualifier(self, bus):
        """set_qualifier() sends SetProperty and updates the cache."""
        path = bus.add_profile("icc-1234")
        profile = Profile.from_object_path(bus, path)

        profile.set_qualifier("RGB.Glossy.600dpi")

        assert bus.calls[-1] == (path, PROFILE_INTERFACE, "SetProperty",
                                 ("Qualifier", "RGB.Glossy.600dpi"), "(ss)")
        assert profile.qualifier == "RGB.Glossy.600dpi"

    def test_set_filename_rejected(self, bus):
        """A rejected write keeps the old cached value."""
        profile = Profile.from_object_path(bus, bus.add_profile("icc-1234"))
        old = profile.filename
        bus.replies["SetProperty"] = BusError("file does not exist")

        with pytest.raises(PropertyError):
            profile.set_filename("/tmp/missing.icc")

        assert profile.filename == old

    def test_install_system_wide(self, bus):
        """install_system_wide() marks the profile as system wide."""
        profile = Profile.from_object_path(bus, bus.add_profile("icc-1234"))

        profile.install_system_wide()

        assert bus.calls[-1][2:] == ("InstallSystemWide", (), None)
        assert profile.is_system_wide is True

    def test_str(self, bus):
        """str() summarizes the profile."""
        path = bus.add_profile("srgb")
        profile = Profile.from_object_path(bus, path)
        assert str(profile) == \
            "srgb (display-device) /usr/share/color/icc/srgb.icc [%s]" % path
