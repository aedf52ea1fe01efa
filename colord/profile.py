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
from colord.constants import PROFILE_INTERFACE
from colord.errors import BusError, PropertyError
from colord.resource import ResourceHandle
from colord.traits import BoundBool, BoundEnum, BoundUnicode
from colord.types import ProfileKind


class Profile(ResourceHandle):
    """
    An ICC profile registered with the daemon
    """

    INTERFACE = PROFILE_INTERFACE

    profile_id = BoundUnicode()
    filename = BoundUnicode()
    qualifier = BoundUnicode()
    title = BoundUnicode()
    kind = BoundEnum(ProfileKind, default_value=ProfileKind.UNKNOWN)
    colorspace = BoundUnicode()
    is_system_wide = BoundBool(False)


    def _coerce(self, trait_name, value):
        if trait_name == 'kind':
            return ProfileKind.from_string(value)
        return value


    def set_filename(self, filename: str, cancellable=None):
        """
        Set the file backing this profile
        """
        self.set_property('Filename', filename, cancellable)


    def set_qualifier(self, qualifier: str, cancellable=None):
        """
        Set the qualifier, e.g. 'RGB.Plain.300dpi'
        """
        self.set_property('Qualifier', qualifier, cancellable)


    def install_system_wide(self, cancellable=None):
        """
        Ask the daemon to copy the profile into the system-wide store
        """
        try:
            self._call('InstallSystemWide', cancellable=cancellable)
        except BusError as err:
            raise PropertyError('Failed to install %s system wide: %s' \
                    % (self.object_path, err.message), cause=err) from err

        self.set_trait('is_system_wide', True)


    def __str__(self):
        self._require_bound()
        return '%s (%s) %s [%s]' % (self.profile_id, self.kind, self.filename or '',
                                    self.object_path)
