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
Local handles for objects owned by the daemon

A handle is bound to exactly one object path. Binding fetches all of
the object's properties in one round trip and caches them in read-only
traits. Until then the handle only knows that it is unbound, and any
cached property raises NotBoundError.
"""
from traitlets import HasTraits, TraitError

from colord.errors import AlreadyBoundError, BindError, BusError, NotBoundError, \
        PropertyError
from colord.log import Log
from colord.traits import WriteOnceUnicode
from colord.util import Cancellable, camel_to_snake, check_cancelled


class ResourceHandle(HasTraits):
    """
    Base class for Device and Profile

    Subclasses set INTERFACE to the D-Bus interface of their object
    and declare a Bound* trait for each cached property. D-Bus
    property names map to trait names by converting CamelCase to
    snake_case, with exceptions listed in _RENAMED. Properties the
    handle has no trait for are ignored.
    """

    INTERFACE = None
    _RENAMED = {}

    object_path = WriteOnceUnicode(None, allow_none=True)


    def __init__(self):
        super().__init__()
        self._bus = None
        self._logger = Log.get('colord.%s' % self.__class__.__name__.lower())


    @classmethod
    def from_object_path(cls, bus, object_path: str, cancellable: Cancellable = None):
        """
        Create a handle already bound to object_path

        :raises BindError: if the object's properties cannot be fetched
        """
        handle = cls()
        handle.bind(bus, object_path, cancellable)
        return handle


    @property
    def bound(self) -> bool:
        """
        True once the handle has been bound to an object path
        """
        return self.object_path is not None


    def bind(self, bus, object_path: str, cancellable: Cancellable = None):
        """
        Bind this handle to an object path and populate its properties

        :param bus: the DaemonBus to use for this and later calls
        :param object_path: path of the daemon-side object
        :param cancellable: optional token to abort the round trip

        :raises AlreadyBoundError: if the handle is already bound
        :raises BindError: if the properties cannot be fetched or do not
                           have the expected types
        """
        if self.bound:
            raise AlreadyBoundError('%s is already bound to %s' \
                    % (self.__class__.__name__, self.object_path))

        values = self._validate_properties(object_path,
                                           self._fetch(bus, object_path, cancellable))

        self._bus = bus
        self._apply(values)
        self.object_path = object_path


    def refresh(self, cancellable: Cancellable = None):
        """
        Fetch the object's properties again

        The cached values are left untouched if any of the new ones is
        invalid.
        """
        self._require_bound()
        self._update(self._fetch(self._bus, self.object_path, cancellable))


    def set_property(self, name: str, value: str, cancellable: Cancellable = None):
        """
        Set a property of the daemon-side object and update the cache

        :param name: the D-Bus property name, e.g. 'Qualifier'
        :param value: the new value

        :raises PropertyError: if the daemon rejects the change
        """
        self._require_bound()
        check_cancelled(cancellable)

        try:
            self._bus.call_object(self.object_path, self.INTERFACE, 'SetProperty',
                                  (name, value), '(ss)', cancellable)
        except BusError as err:
            raise PropertyError('Failed to set %s on %s: %s' \
                    % (name, self.object_path, err.message), cause=err) from err

        self._update({name: value})


    def _call(self, method: str, args: tuple = None, signature: str = None,
              cancellable: Cancellable = None) -> tuple:
        self._require_bound()
        check_cancelled(cancellable)
        return self._bus.call_object(self.object_path, self.INTERFACE, method,
                                     args, signature, cancellable)


    def _fetch(self, bus, object_path, cancellable) -> dict:
        check_cancelled(cancellable)
        try:
            return bus.get_object_properties(object_path, self.INTERFACE,
                                             cancellable=cancellable)
        except BusError as err:
            raise BindError('Failed to bind %s: %s' % (object_path, err.message),
                            cause=err) from err


    def _validate_properties(self, object_path: str, properties: dict) -> dict:
        # pylint: disable=protected-access
        traits = self.traits()
        values = {}
        for name, value in properties.items():
            trait_name = self._RENAMED.get(name, camel_to_snake(name))
            if trait_name not in traits or trait_name == 'object_path':
                continue
            try:
                values[trait_name] = traits[trait_name]._validate(
                    self, self._coerce(trait_name, value))
            except (TraitError, TypeError, ValueError) as err:
                raise BindError('Failed to bind %s: invalid %s %r' \
                        % (object_path, name, value), cause=err) from err

        return values


    def _apply(self, values: dict):
        for trait_name, value in values.items():
            self.set_trait(trait_name, value)


    def _update(self, properties: dict):
        self._apply(self._validate_properties(self.object_path, properties))


    def _coerce(self, trait_name: str, value):
        return value


    def _require_bound(self):
        if not self.bound:
            raise NotBoundError('%s is not bound to an object path' % self.__class__.__name__)


    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self.object_path or 'unbound')
