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
from .client import Client
from .config import ClientSettings
from .device import Device
from .errors import AlreadyBoundError, AlreadyConnectedError, BindError, BusError, \
        CancelledError, ClientError, ConnectionError, ConversionError, CreationError, \
        DeletionError, LookupError, NotBoundError, NotConnectedError, PreconditionError, \
        PropertyError
from .events import Changed, DeviceAdded, DeviceRemoved, ProfileAdded, ProfileRemoved, \
        Unrecognized, decode_signal
from .profile import Profile
from .types import DeviceKind, ProfileKind
from .util import Cancellable, Signal
from .version import __version__
