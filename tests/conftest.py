#
# python-colord - Copyright (C) 2026 python-colord Developers
# LGPL-3.0-or-later
#

# colord test configuration and shared fixtures
from __future__ import annotations

import pytest

from colord.client import Client
from colord.config import ClientSettings
from colord.constants import INTERFACE, PATH, PROPERTIES_INTERFACE
from colord.errors import BusError

DEVICE_BASE = "/org/freedesktop/ColorManager/devices"
PROFILE_BASE = "/org/freedesktop/ColorManager/profiles"


# ─────────────────────────────────────────────────────────────────────────────
# Fake transport
# ─────────────────────────────────────────────────────────────────────────────


class FakeSubscription:
    """Subscription returned by FakeBus.subscribe()."""

    def __init__(self, handler):
        self.handler = handler
        self.active = True

    def unsubscribe(self):
        self.active = False


class FakeBus:
    """
    In-memory stand-in for DaemonBus.

    Replies to daemon methods are looked up in ``replies`` by method name;
    a reply may be a tuple, an exception to raise, or a callable taking
    the call arguments. Objects exported by the daemon live in
    ``objects``, keyed by path, holding their D-Bus properties.
    Every call is recorded in ``calls``.
    """

    def __init__(self, properties=None):
        self.properties = {"DaemonVersion": "1.4.6"} if properties is None else properties
        self.replies = {}
        self.objects = {}
        self.calls = []
        self.subscriptions = []
        self.on_get_all = None

    @property
    def methods(self):
        return [call[2] for call in self.calls]

    def call(self, method, args=None, signature=None, cancellable=None):
        return self.call_object(PATH, INTERFACE, method, args, signature, cancellable)

    def call_object(self, object_path, interface, method, args=None, signature=None,
                    cancellable=None):
        args = tuple(args or ())
        self.calls.append((object_path, interface, method, args, signature))

        reply = self.replies.get(method, ())
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(*args)
        return reply

    def get_cached_property(self, name):
        return self.properties.get(name)

    def get_object_properties(self, object_path, interface, cancellable=None):
        self.calls.append((object_path, PROPERTIES_INTERFACE, "GetAll", (interface,), "(s)"))

        if self.on_get_all is not None:
            self.on_get_all(object_path)

        props = self.objects.get(object_path)
        if props is None:
            raise BusError("Object does not exist at path %s" % object_path,
                           method="GetAll",
                           dbus_name="org.freedesktop.DBus.Error.UnknownObject")
        return dict(props)

    def subscribe(self, handler):
        subscription = FakeSubscription(handler)
        self.subscriptions.append(subscription)
        return subscription

    def emit(self, signal_name, *args, sender=":1.42"):
        for subscription in list(self.subscriptions):
            if subscription.active:
                subscription.handler(sender, signal_name, tuple(args))

    def add_device(self, name, kind="display", **props):
        path = "%s/%s" % (DEVICE_BASE, name)
        self.objects[path] = {"DeviceId": name, "Kind": kind, "Model": "Model %s" % name,
                              "Vendor": "Acme", "Serial": "0001", "Colorspace": "rgb",
                              "Mode": "physical", "Created": 1288185839,
                              "Modified": 1288185839, "Profiles": [], **props}
        return path

    def add_profile(self, name, kind="display-device", **props):
        path = "%s/%s" % (PROFILE_BASE, name)
        self.objects[path] = {"ProfileId": name, "Filename": "/usr/share/color/icc/%s.icc" % name,
                              "Qualifier": "", "Title": "Profile %s" % name, "Kind": kind,
                              "Colorspace": "rgb", "IsSystemWide": False, **props}
        return path


# ─────────────────────────────────────────────────────────────────────────────
# Client fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def reset_singleton():
    """Make sure no shared client leaks between tests."""
    Client._instance = None
    yield
    Client._instance = None


@pytest.fixture
def fake_bus():
    """A fake daemon with no devices or profiles."""
    return FakeBus()


@pytest.fixture
def bus_opens(fake_bus, monkeypatch):
    """Route Client.connect() to fake_bus; records each open."""
    opens = []

    def factory(cancellable=None, timeout=None):
        opens.append(timeout)
        return fake_bus

    monkeypatch.setattr(Client, "bus_factory", staticmethod(factory))
    return opens


@pytest.fixture
def settings():
    """Settings which ignore the environment."""
    return ClientSettings()


@pytest.fixture
def client(bus_opens, settings):
    """A client connected to fake_bus."""
    client = Client(settings)
    client.connect()
    yield client
    client.close()
