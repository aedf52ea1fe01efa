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
"""
System bus transport for the colord daemon

DaemonBus is the only module which talks to D-Bus directly. It wraps a
pydbus SystemBus connection and exposes the handful of primitives the
client and the resource handles need: a blocking method call, the
properties of the daemon captured when the connection was opened, and
subscription to the daemon's signals.
"""
import contextlib
import math

from gi.repository import Gio, GLib
from pydbus import SystemBus

from colord.constants import INTERFACE, PATH, PROPERTIES_INTERFACE, SERVICE
from colord.errors import BusError, CancelledError
from colord.log import Log, LOG_TRACE
from colord.util import Cancellable


def timeout_to_glib(timeout: float) -> int:
    """
    Convert a timeout in seconds to GLib milliseconds

    None or a negative value selects the bus default (-1). Anything
    shorter than a millisecond waits one millisecond, and values past
    the range of a gint become GLib.MAXINT, which never times out.

    :raises ValueError: if timeout is NaN
    """
    if timeout is None:
        return -1

    if math.isnan(timeout):
        raise ValueError('Timeout must be a number of seconds, got %r' % (timeout,))

    if timeout < 0:
        return -1

    msec = timeout * 1000
    if msec >= GLib.MAXINT:
        return GLib.MAXINT

    return max(1, int(math.ceil(msec)))


def _is_cancelled(error: GLib.Error) -> bool:
    return error.matches(Gio.io_error_quark(), Gio.IOErrorEnum.CANCELLED)


def translate_error(error: GLib.Error, method: str = None) -> Exception:
    """
    Convert a GLib.Error raised by GIO into a client exception

    Cancellation becomes CancelledError. Everything else becomes a
    BusError carrying the message, with the remote error name
    stripped off and kept separately.
    """
    if _is_cancelled(error):
        return CancelledError('Operation was cancelled', cause=error)

    message = error.message
    dbus_name = None
    if Gio.DBusError.is_remote_error(error):
        dbus_name = Gio.DBusError.get_remote_error(error)
        prefix = 'GDBus.Error:%s: ' % dbus_name
        if message.startswith(prefix):
            message = message[len(prefix):]

    return BusError(message, cause=error, method=method, dbus_name=dbus_name)


@contextlib.contextmanager
def gio_cancellable(cancellable: Cancellable = None):
    """
    Provide a Gio.Cancellable which is cancelled together with the
    given token, for the duration of a single call.
    """
    if cancellable is None:
        yield None
        return

    cancellable.raise_if_cancelled()

    linked = Gio.Cancellable()
    callback = linked.cancel
    cancellable.connect(callback)
    try:
        yield linked
    finally:
        cancellable.disconnect(callback)


class DaemonBus:
    """
    Connection to colord on the system bus

    Use open() to create an instance. Calls are synchronous and may be
    made from any thread; signal handlers run on the thread iterating
    the default GLib main context.

    :param bus: a connected pydbus bus
    :param timeout: call timeout in seconds, None for the bus default

    :raises ValueError: if timeout is NaN
    """

    def __init__(self, bus, timeout: float = None):
        self._bus = bus
        self._timeout = timeout
        self._timeout_ms = timeout_to_glib(timeout)
        self._properties = {}
        self._logger = Log.get('colord.bus')


    @classmethod
    def open(cls, cancellable: Cancellable = None, timeout: float = None) -> 'DaemonBus':
        """
        Connect to the system bus and fetch the daemon's properties

        The property fetch also starts the daemon if it is activatable
        and not yet running.

        :raises BusError: if the bus or the daemon cannot be reached
        """
        try:
            bus = SystemBus()
        except GLib.Error as err:
            raise translate_error(err, 'connect') from err

        daemon = cls(bus, timeout=timeout)
        daemon._properties = daemon.get_object_properties(PATH, INTERFACE,
                                                          cancellable=cancellable)
        return daemon


    @property
    def timeout(self) -> float:
        """
        Timeout applied to each call, in seconds
        """
        return self._timeout


    def call(self, method: str, args: tuple = None, signature: str = None,
             cancellable: Cancellable = None) -> tuple:
        """
        Call a method on the daemon's main interface and wait for the reply

        :param method: the D-Bus method name
        :param args: arguments, packed according to signature
        :param signature: tuple signature of args, e.g. '(su)'
        :param cancellable: optional token to abort the call

        :return: the reply as a tuple, empty for methods without output
        """
        return self.call_object(PATH, INTERFACE, method, args, signature, cancellable)


    def call_object(self, object_path: str, interface: str, method: str,
                    args: tuple = None, signature: str = None,
                    cancellable: Cancellable = None) -> tuple:
        """
        Call a method on any object exported by the daemon

        :raises BusError: if the call fails
        :raises CancelledError: if the token was cancelled
        """
        parameters = None
        if signature is not None:
            parameters = GLib.Variant(signature, tuple(args or ()))

        self._logger.log(LOG_TRACE, 'Call %s.%s on %s: %s',
                         interface, method, object_path, args)

        with gio_cancellable(cancellable) as linked:
            try:
                reply = self._bus.con.call_sync(SERVICE, object_path, interface, method,
                                                parameters, None, Gio.DBusCallFlags.NONE,
                                                self._timeout_ms, linked)
            except GLib.Error as err:
                raise translate_error(err, method) from err

        if reply is None:
            return ()

        return tuple(reply.unpack())


    def get_cached_property(self, name: str):
        """
        Get a property of the daemon as read when the bus was opened

        :return: the value, or None if the daemon does not have it
        """
        return self._properties.get(name)


    def get_object_properties(self, object_path: str, interface: str,
                              cancellable: Cancellable = None) -> dict:
        """
        Fetch all properties of an object in one round trip
        """
        reply = self.call_object(object_path, PROPERTIES_INTERFACE, 'GetAll',
                                 (interface,), '(s)', cancellable)
        return dict(reply[0])


    def subscribe(self, handler):
        """
        Deliver signals emitted by the daemon to handler

        :param handler: callable taking (sender, signal_name, args)

        :return: subscription object, call unsubscribe() to stop delivery
        """
        def signal_fired(sender, object_path, iface, signal_name, params):
            handler(sender, signal_name, tuple(params))

        return self._bus.subscribe(sender=SERVICE, iface=INTERFACE, object=PATH,
                                   signal_fired=signal_fired)
