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
Typed notifications decoded from the daemon's signals

decode_signal() turns the name and arguments of a D-Bus signal into
exactly one of the variants below. Anything it does not understand,
including known signals with malformed arguments, becomes
Unrecognized so that callers never have to compare signal names.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from colord.device import Device
    from colord.profile import Profile


@dataclass(frozen=True)
class Changed:
    """
    Something in the daemon changed
    """


@dataclass(frozen=True)
class DeviceAdded:
    """
    A device was added. device is None if it could not be bound.
    """
    object_path: str
    device: Optional['Device'] = None


@dataclass(frozen=True)
class DeviceRemoved:
    """
    A device was removed
    """
    object_path: str


@dataclass(frozen=True)
class ProfileAdded:
    """
    A profile was added. profile is None if it could not be bound.
    """
    object_path: str
    profile: Optional['Profile'] = None


@dataclass(frozen=True)
class ProfileRemoved:
    """
    A profile was removed
    """
    object_path: str


@dataclass(frozen=True)
class Unrecognized:
    """
    A signal this client does not know how to handle
    """
    name: str
    args: tuple = ()


Event = Union[Changed, DeviceAdded, DeviceRemoved, ProfileAdded, ProfileRemoved, Unrecognized]


_PATH_SIGNALS = {
    'DeviceAdded': DeviceAdded,
    'DeviceRemoved': DeviceRemoved,
    'ProfileAdded': ProfileAdded,
    'ProfileRemoved': ProfileRemoved,
}


def decode_signal(name: str, args: tuple = ()) -> Event:
    """
    Decode a signal emitted by the daemon

    :param name: the D-Bus signal name
    :param args: the signal arguments

    :return: one of the event variants
    """
    args = tuple(args or ())

    if name == 'Changed':
        return Changed()

    variant = _PATH_SIGNALS.get(name)
    if variant is None or len(args) != 1 or not isinstance(args[0], str):
        return Unrecognized(name, args)

    return variant(args[0])
