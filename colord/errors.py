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
Exceptions raised by the colord client

Recoverable failures derive from ClientError and carry the lower level
exception which caused them. Misuse of the API (calling methods on an
unconnected client, binding a handle twice) raises a PreconditionError
instead, which is not meant to be caught.
"""
import builtins


class ClientError(Exception):
    """
    Base class for recoverable client failures

    :param message: human readable description
    :param cause: the lower level exception, if any
    """
    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class BusError(ClientError):
    """
    A call on the bus failed, or the bus could not be reached

    :param method: the D-Bus method which failed
    :param dbus_name: the remote error name reported by the daemon
    """
    def __init__(self, message: str, cause: Exception = None,
                 method: str = None, dbus_name: str = None):
        super().__init__(message, cause)
        self.method = method
        self.dbus_name = dbus_name


class ConnectionError(ClientError, builtins.ConnectionError):
    """
    Connecting to the daemon failed
    """


class LookupError(ClientError, builtins.LookupError):
    """
    A find-by call matched nothing, or the daemon rejected it
    """


class CreationError(ClientError):
    """
    The daemon rejected a create request, or the new object
    could not be bound locally
    """


class DeletionError(ClientError):
    """
    The daemon rejected a delete request
    """


class ConversionError(ClientError):
    """
    A reply holding several object paths could not be converted
    into bound handles
    """


class CancelledError(ClientError):
    """
    The operation was cancelled before it completed
    """


class BindError(ClientError):
    """
    A resource handle could not fetch the properties of its object
    """


class PropertyError(ClientError):
    """
    Writing a property of a resource failed
    """


class PreconditionError(RuntimeError):
    """
    The API was used incorrectly
    """


class NotConnectedError(PreconditionError):
    pass


class AlreadyConnectedError(PreconditionError):
    pass


class NotBoundError(PreconditionError):
    pass


class AlreadyBoundError(PreconditionError):
    pass
