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
# pylint: disable=broad-except
"""
Various helpers used across the library.
"""
import re
import threading

from wrapt import synchronized

from colord.errors import CancelledError
from colord.log import Log


def camel_to_snake(name: str) -> str:
    """
    Returns a snake_case_name from a CamelCaseName
    """
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


class Signal:
    """
    A simple signalling construct.

    Listeners may connect() to this signal, and their handlers will
    be invoked in connection order when fire() is called. A handler
    which raises is logged and does not prevent delivery to the
    remaining handlers.

    :param name: name of the notification, used for logging
    """
    def __init__(self, name: str = None):
        self._name = name
        self._handlers = []
        self._logger = Log.get('colord.signal')


    @property
    def name(self) -> str:
        """
        The name of this notification
        """
        return self._name


    @synchronized
    def connect(self, handler):
        """
        Connect a handler to this signal

        :param handler: Function to invoke when the signal fires
        """
        if handler not in self._handlers:
            self._handlers.append(handler)


    @synchronized
    def disconnect(self, handler):
        """
        Disconnect a previously connected handler

        :param handler: The handler to remove
        """
        if handler in self._handlers:
            self._handlers.remove(handler)


    @property
    def handlers(self) -> tuple:
        """
        The currently connected handlers
        """
        with synchronized(self):
            return tuple(self._handlers)


    def fire(self, *args, **kwargs):
        """
        Fire the signal, invoking all connected handlers

        :params args: Arguments to call handlers with
        """
        for handler in self.handlers:
            try:
                handler(*args, **kwargs)
            except Exception:
                self._logger.exception('Handler %r for %s failed', handler, self._name)


class Cancellable:
    """
    Token used to cancel a blocking operation

    Hand the same token to an operation and to whatever code decides
    it is no longer needed. Once cancel() has been called the
    operation raises CancelledError at its next checkpoint, and
    callbacks registered with connect() are invoked so that in-flight
    bus calls can be aborted.
    """
    def __init__(self):
        self._event = threading.Event()
        self._callbacks = Signal('cancelled')


    def cancel(self):
        """
        Cancel the operation. Calling this more than once is harmless.
        """
        with synchronized(self):
            if self._event.is_set():
                return
            self._event.set()

        self._callbacks.fire()


    def is_cancelled(self) -> bool:
        """
        True if cancel() has been called
        """
        return self._event.is_set()


    def connect(self, callback):
        """
        Invoke callback when the token is cancelled

        If the token is already cancelled, the callback runs immediately.
        """
        with synchronized(self):
            if not self._event.is_set():
                self._callbacks.connect(callback)
                return

        callback()


    def disconnect(self, callback):
        """
        Remove a callback added with connect()
        """
        self._callbacks.disconnect(callback)


    def raise_if_cancelled(self):
        """
        Raise CancelledError if the token has been cancelled
        """
        if self._event.is_set():
            raise CancelledError('Operation was cancelled')


def check_cancelled(cancellable: Cancellable = None):
    """
    Raise CancelledError if the optional token has been cancelled
    """
    if cancellable is not None:
        cancellable.raise_if_cancelled()
