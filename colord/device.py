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
from traitlets import Unicode

from colord.constants import DEVICE_INTERFACE
from colord.errors import BusError, PropertyError
from colord.resource import ResourceHandle
from colord.traits import BoundEnum, BoundInt, BoundList, BoundUnicode
from colord.types import DeviceKind


class Device(ResourceHandle):
    """
    A color managed device, such as a display or a printer
    """

    INTERFACE = DEVICE_INTERFACE
    _RENAMED = {'Profiles': 'profile_paths'}

    device_id = BoundUnicode()
    kind = BoundEnum(DeviceKind, default_value=DeviceKind.UNKNOWN)
    model = BoundUnicode()
    vendor = BoundUnicode()
    serial = BoundUnicode()
    colorspace = BoundUnicode()
    mode = BoundUnicode()
    created = BoundInt(0)
    modified = BoundInt(0)
    profile_paths = BoundList(Unicode())


    def _coerce(self, trait_name, value):
        if trait_name == 'kind':
            return DeviceKind.from_string(value)
        if trait_name == 'profile_paths':
            return list(value)
        return value


    def add_profile(self, profile, relation: str = 'hard', cancellable=None):
        """
        Assign a profile to this device

        :param profile: a bound Profile
        :param relation: 'hard' for an explicit user choice, 'soft' for
                         an automatic assignment
        """
        self._modify_profiles('AddProfile', (relation, profile.object_path), '(so)',
                              cancellable)


    def remove_profile(self, profile, cancellable=None):
        """
        Remove a profile assignment from this device
        """
        self._modify_profiles('RemoveProfile', (profile.object_path,), '(o)', cancellable)


    def _modify_profiles(self, method, args, signature, cancellable):
        try:
            self._call(method, args, signature, cancellable)
        except BusError as err:
            raise PropertyError('Failed to %s on %s: %s' \
                    % (method, self.object_path, err.message), cause=err) from err

        self.refresh(cancellable)


    def __str__(self):
        self._require_bound()
        return '%s (%s) %s %s [%s]' % (self.device_id, self.kind, self.vendor or '',
                                       self.model or '', self.object_path)
