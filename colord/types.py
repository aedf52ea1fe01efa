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
from enum import Enum


class _KindEnum(Enum):
    """
    Enum whose values are the canonical strings used on the bus
    """

    @classmethod
    def from_string(cls, value: str):
        """
        Look up a member by its canonical string, falling back to
        UNKNOWN for anything the daemon may add in the future.
        """
        try:
            return cls(value.lower())
        except (AttributeError, ValueError):
            return cls.UNKNOWN


    @classmethod
    def to_string(cls, kind) -> str:
        """
        Return the canonical string of a member, or validate a string
        against the known members.

        :raises ValueError: if kind is not a known member or name
        """
        if isinstance(kind, cls):
            return kind.value

        if isinstance(kind, str):
            return cls(kind.lower()).value

        raise ValueError('%r is not a valid %s' % (kind, cls.__name__))


    def __str__(self):
        return self.value


class DeviceKind(_KindEnum):
    """
    Categories of color managed devices
    """
    UNKNOWN = 'unknown'
    DISPLAY = 'display'
    SCANNER = 'scanner'
    PRINTER = 'printer'
    CAMERA = 'camera'
    WEBCAM = 'webcam'


class ProfileKind(_KindEnum):
    """
    ICC profile classes
    """
    UNKNOWN = 'unknown'
    INPUT_DEVICE = 'input-device'
    DISPLAY_DEVICE = 'display-device'
    OUTPUT_DEVICE = 'output-device'
    DEVICELINK = 'devicelink'
    COLORSPACE_CONVERSION = 'colorspace-conversion'
    ABSTRACT = 'abstract'
    NAMED_COLOR = 'named-color'
