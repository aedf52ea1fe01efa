#
# python-colord - Copyright (C) 2026 python-colord Developers
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#
# pylint: disable=redefined-builtin
"""
Client for the colord color management daemon

The Client owns the one connection to the daemon. Every operation is a
blocking round trip, and replies containing object paths are converted
into bound Device and Profile handles which belong to the caller. The
daemon's signals are decoded into typed events and re-emitted through
the Signal attributes of the client.
"""
import weakref

from dataclasses import replace

from wrapt import synchronized

from colord.config import ClientSettings
from colord.device import Device
from colord.errors import AlreadyConnectedError, BindError, BusError, CancelledError, \
        ConnectionError, ConversionError, CreationError, DeletionError, LookupError, \
        NotConnectedError
from colord.events import Changed, DeviceAdded, DeviceRemoved, ProfileAdded, \
        ProfileRemoved, Unrecognized, decode_signal
from colord.log import Log, LOG_TRACE
from colord.profile import Profile
from colord.types import DeviceKind, ProfileKind
from colord.util import Cancellable, Signal, check_cancelled


UINT32_MAX = 0xffffffff


def open_system_bus(cancellable: Cancellable = None, timeout: float = None):
    """
    Open the system bus transport

    The import is deferred so that the rest of the library can be used
    without GLib, e.g. with a different transport in tests.
    """
    from colord.bus import DaemonBus
    return DaemonBus.open(cancellable, timeout=timeout)


def _weak_handler(method):
    # the bus must not keep the client alive
    ref = weakref.WeakMethod(method)

    def handler(*args):
        target = ref()
        if target is not None:
            target(*args)

    return handler


def _check_options(options: int):
    if not isinstance(options, int) or options < 0 or options > UINT32_MAX:
        raise ValueError('options must be an unsigned 32 bit integer, got %r' % (options,))


class Client:
    """
    Connection to the colord daemon

    Use Client.new() to share a single instance within the process,
    then call connect() before using any other method.

    Notifications are delivered through the following signals, each
    handler receiving the decoded event:

    changed
        Changed, something in the daemon changed
    device_added
        DeviceAdded, with a bound Device when it could be bound
    device_removed
        DeviceRemoved
    profile_added
        ProfileAdded, with a bound Profile when it could be bound
    profile_removed
        ProfileRemoved

    Handlers run on the thread which delivers bus signals, in the
    order the daemon emitted them.

    :param settings: optional ClientSettings, read from the
                     environment if not given
    """

    bus_factory = staticmethod(open_system_bus)

    _instance = None


    def __init__(self, settings: ClientSettings = None):
        if settings is None:
            settings = ClientSettings.from_environment()

        self._settings = settings
        self._settings.apply_logging()
        self._logger = Log.get('colord.client')

        self._bus = None
        self._daemon_version = None
        self._finalizer = None

        self.changed = Signal('changed')
        self.device_added = Signal('device-added')
        self.device_removed = Signal('device-removed')
        self.profile_added = Signal('profile-added')
        self.profile_removed = Signal('profile-removed')

        self._notifications = {Changed: self.changed,
                               DeviceAdded: self.device_added,
                               DeviceRemoved: self.device_removed,
                               ProfileAdded: self.profile_added,
                               ProfileRemoved: self.profile_removed}


    @synchronized
    @classmethod
    def new(cls, settings: ClientSettings = None) -> 'Client':
        """
        Get the shared client for this process

        Returns the existing instance while anything still holds a
        reference to it, otherwise creates a new one. The shared slot
        itself does not keep the instance alive.

        :param settings: used only when a new instance is created
        """
        client = cls._instance() if cls._instance is not None else None
        if client is None:
            client = cls(settings)
            cls._instance = weakref.ref(client, cls._clear_instance)

        return client


    @classmethod
    def _clear_instance(cls, ref):
        if cls._instance is ref:
            cls._instance = None


    @property
    def connected(self) -> bool:
        """
        True after a successful connect()
        """
        return self._bus is not None


    @property
    def daemon_version(self) -> str:
        """
        Version of the daemon, or None if not connected or not advertised
        """
        return self._daemon_version


    def get_daemon_version(self) -> str:
        """
        Get the daemon version captured by connect(). Never does I/O.
        """
        return self._daemon_version


    def connect(self, cancellable: Cancellable = None):
        """
        Connect to the daemon and start receiving its signals

        :raises AlreadyConnectedError: if this client is already connected
        :raises ConnectionError: if the daemon cannot be reached
        """
        if self._bus is not None:
            raise AlreadyConnectedError('Already connected to colord')

        check_cancelled(cancellable)

        try:
            bus = self.bus_factory(cancellable, timeout=self._settings.timeout)
        except BusError as err:
            raise ConnectionError('Failed to connect to colord: %s' % err.message,
                                  cause=err) from err

        version = bus.get_cached_property('DaemonVersion')
        if version is None:
            version = bus.get_cached_property('Title')

        subscription = bus.subscribe(_weak_handler(self._on_bus_signal))

        self._bus = bus
        self._daemon_version = str(version) if version is not None else None
        self._finalizer = weakref.finalize(self, subscription.unsubscribe)

        self._logger.debug('Connected to colord daemon version %s', self._daemon_version)


    def close(self):
        """
        Stop receiving signals and drop the connection

        Handles returned earlier keep working until the bus itself
        goes away. Calling close() on a closed client does nothing.
        """
        if self._finalizer is not None:
            self._finalizer()

        self._finalizer = None
        self._bus = None
        self._daemon_version = None


    def __enter__(self):
        return self


    def __exit__(self, *args):
        self.close()


    def get_devices(self, cancellable: Cancellable = None) -> list:
        """
        Get all devices known to the daemon

        :return: list of bound Device handles, in daemon order
        :raises ConversionError: if any of the devices cannot be bound
        """
        bus, reply = self._call('GetDevices', cancellable=cancellable)
        return self._handles_from_reply(bus, Device, reply, cancellable)


    def get_devices_by_kind(self, kind, cancellable: Cancellable = None) -> list:
        """
        Get all devices of a kind

        :param kind: a DeviceKind, or its string form such as 'display'
        """
        self._require_connected()
        kind = DeviceKind.to_string(kind)

        bus, reply = self._call('GetDevicesByKind', (kind,), '(s)', cancellable)
        return self._handles_from_reply(bus, Device, reply, cancellable)


    def get_profiles(self, cancellable: Cancellable = None) -> list:
        """
        Get all profiles known to the daemon

        :return: list of bound Profile handles, in daemon order
        :raises ConversionError: if any of the profiles cannot be bound
        """
        bus, reply = self._call('GetProfiles', cancellable=cancellable)
        return self._handles_from_reply(bus, Profile, reply, cancellable)


    def get_profiles_by_kind(self, kind, cancellable: Cancellable = None) -> list:
        """
        Get all profiles of a kind

        :param kind: a ProfileKind, or its string form such as 'display-device'
        """
        self._require_connected()
        kind = ProfileKind.to_string(kind)

        bus, reply = self._call('GetProfilesByKind', (kind,), '(s)', cancellable)
        return self._handles_from_reply(bus, Profile, reply, cancellable)


    def find_device_by_id(self, device_id: str, cancellable: Cancellable = None) -> Device:
        """
        Find a device by its identifier

        :raises LookupError: if there is no such device
        """
        return self._find(Device, 'FindDeviceById', (device_id,), '(s)', cancellable)


    def find_device_by_property(self, key: str, value: str,
                                cancellable: Cancellable = None) -> Device:
        """
        Find a device with a matching metadata property

        :raises LookupError: if there is no such device
        """
        return self._find(Device, 'FindDeviceByProperty', (key, value), '(ss)', cancellable)


    def find_profile_by_id(self, profile_id: str, cancellable: Cancellable = None) -> Profile:
        """
        Find a profile by its identifier

        :raises LookupError: if there is no such profile
        """
        return self._find(Profile, 'FindProfileById', (profile_id,), '(s)', cancellable)


    def find_profile_by_filename(self, filename: str,
                                 cancellable: Cancellable = None) -> Profile:
        """
        Find a profile by the file backing it

        :raises LookupError: if there is no such profile
        """
        return self._find(Profile, 'FindProfileByFilename', (filename,), '(s)', cancellable)


    def create_device(self, device_id: str, options: int = 0,
                      cancellable: Cancellable = None) -> Device:
        """
        Create a device

        If the device is created but cannot be bound afterwards it is
        left in place in the daemon.

        :param device_id: identifier for the new device
        :param options: flags passed to the daemon as-is

        :raises CreationError: if the daemon refuses or binding fails
        """
        return self._create(Device, 'CreateDevice', device_id, options, cancellable)


    def create_profile(self, profile_id: str, options: int = 0,
                       cancellable: Cancellable = None) -> Profile:
        """
        Create a profile

        :param profile_id: identifier for the new profile
        :param options: flags passed to the daemon as-is

        :raises CreationError: if the daemon refuses or binding fails
        """
        return self._create(Profile, 'CreateProfile', profile_id, options, cancellable)


    def delete_device(self, device_id: str, cancellable: Cancellable = None) -> bool:
        """
        Delete a device

        :return: True once the daemon has deleted it
        :raises DeletionError: with the daemon's message if it refuses
        """
        self._call('DeleteDevice', (device_id,), '(s)', cancellable, DeletionError)
        return True


    def delete_profile(self, profile_id: str, cancellable: Cancellable = None) -> bool:
        """
        Delete a profile

        :return: True once the daemon has deleted it
        :raises DeletionError: with the daemon's message if it refuses
        """
        self._call('DeleteProfile', (profile_id,), '(s)', cancellable, DeletionError)
        return True


    def _require_connected(self):
        bus = self._bus
        if bus is None:
            raise NotConnectedError('Not connected to colord, call connect() first')
        return bus


    def _call(self, method, args=None, signature=None, cancellable=None,
              error_cls=ConnectionError):
        bus = self._require_connected()
        check_cancelled(cancellable)

        try:
            reply = bus.call(method, args, signature, cancellable)
        except BusError as err:
            raise error_cls('Failed to %s: %s' % (method, err.message), cause=err) from err

        check_cancelled(cancellable)
        return bus, reply


    def _find(self, handle_cls, method, args, signature, cancellable):
        bus, reply = self._call(method, args, signature, cancellable, LookupError)
        return self._handle_from_reply(bus, handle_cls, reply, method, cancellable,
                                       LookupError)


    def _create(self, handle_cls, method, object_id, options, cancellable):
        self._require_connected()
        _check_options(options)

        bus, reply = self._call(method, (object_id, options), '(su)', cancellable,
                                CreationError)
        return self._handle_from_reply(bus, handle_cls, reply, method, cancellable,
                                       CreationError)


    def _handle_from_reply(self, bus, handle_cls, reply, method, cancellable, error_cls):
        try:
            object_path, = reply
        except (TypeError, ValueError) as err:
            raise error_cls('Failed to %s: unexpected reply %r' % (method, reply),
                            cause=err) from err

        self._logger.log(LOG_TRACE, '%s: %s', method, object_path)

        try:
            return handle_cls.from_object_path(bus, object_path, cancellable)
        except BindError as err:
            raise error_cls('Failed to %s: %s' % (method, err.message), cause=err) from err


    def _handles_from_reply(self, bus, handle_cls, reply, cancellable) -> list:
        try:
            object_paths, = reply
        except (TypeError, ValueError) as err:
            raise ConversionError('Unexpected reply %r' % (reply,), cause=err) from err

        handles = []
        try:
            for object_path in object_paths:
                self._logger.log(LOG_TRACE, '%s', object_path)
                handles.append(handle_cls.from_object_path(bus, object_path, cancellable))

        except BindError as err:
            handles.clear()
            raise ConversionError('Failed to set %s object path: %s' \
                    % (handle_cls.__name__.lower(), err.message), cause=err) from err

        except CancelledError:
            handles.clear()
            raise

        return handles


    def _bind_quietly(self, bus, handle_cls, object_path):
        if bus is None:
            return None

        try:
            return handle_cls.from_object_path(bus, object_path)
        except BindError as err:
            self._logger.warning('Could not bind %s: %s', object_path, err.message)
            return None


    def _on_bus_signal(self, sender, signal_name, args):
        event = decode_signal(signal_name, args)

        if isinstance(event, Unrecognized):
            self._logger.warning("Unhandled signal '%s' from %s: %s",
                                 signal_name, sender, event.args)
            return

        bus = self._bus
        if isinstance(event, DeviceAdded):
            event = replace(event, device=self._bind_quietly(bus, Device, event.object_path))
        elif isinstance(event, ProfileAdded):
            event = replace(event, profile=self._bind_quietly(bus, Profile, event.object_path))

        self._logger.debug('Signal %s: %s', signal_name, event)
        self._notifications[type(event)].fire(event)


    def __repr__(self):
        if self._bus is None:
            return '<Client disconnected>'
        return '<Client colord %s>' % self._daemon_version
