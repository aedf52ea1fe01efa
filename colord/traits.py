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
# pylint: disable=protected-access
"""
Traitlets used by resource handles
"""
from traitlets import Bool, Int, List, Unicode, UseEnum

from colord.errors import NotBoundError


class WriteOnceMixin:
    """
    Mixin for traits which cannot be changed after an initial
    value has been set.
    """
    write_once = True

    def validate(self, obj, value):
        if self.name not in obj._trait_values or \
                obj._trait_values[self.name] == self.default_value:
            return super().validate(obj, value)

        self.error(obj, value)


class WriteOnceUnicode(WriteOnceMixin, Unicode):
    """
    Subclass of Unicode which may only be written once
    """
    pass


class BoundMixin:
    """
    Mixin for read-only traits holding values cached from the
    daemon. Reading one before the owning handle has been bound
    to an object path raises NotBoundError.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('read_only', True)
        super().__init__(*args, **kwargs)


    def get(self, obj, cls=None):
        if obj.object_path is None:
            raise NotBoundError('%s.%s is not available until bound to an object path' \
                    % (obj.__class__.__name__, self.name))
        return super().get(obj, cls)


class BoundUnicode(BoundMixin, Unicode):
    def __init__(self, default_value=None, **kwargs):
        kwargs.setdefault('allow_none', True)
        super().__init__(default_value, **kwargs)


class BoundInt(BoundMixin, Int):
    pass


class BoundBool(BoundMixin, Bool):
    pass


class BoundList(BoundMixin, List):
    pass


class BoundEnum(BoundMixin, UseEnum):
    pass
