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
import logging
import math
import os

from typing import NamedTuple, Optional

from colord.log import Log


ENV_TIMEOUT = 'COLORD_CLIENT_TIMEOUT'
ENV_DEBUG = 'COLORD_CLIENT_DEBUG'
ENV_COLOR = 'COLORD_CLIENT_COLOR'

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _parse_bool(value) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUE_VALUES


def _parse_timeout(value) -> Optional[float]:
    if value is None or value.strip() == '':
        return None

    try:
        timeout = float(value)
    except ValueError:
        raise ValueError('%s must be a number of seconds, got %r' % (ENV_TIMEOUT, value)) from None

    if not math.isfinite(timeout):
        raise ValueError('%s must be a finite number of seconds, got %r' % (ENV_TIMEOUT, value))

    # negative means "use the bus default"
    if timeout < 0:
        return None

    return timeout


class ClientSettings(NamedTuple):
    """
    Tunables for the client, read from the environment

    The addressing of the daemon is fixed and intentionally absent
    from here. Only the call timeout and logging behavior can be
    adjusted.
    """
    timeout: Optional[float] = None
    debug: bool = False
    color: bool = False


    @classmethod
    def from_environment(cls, environ=None) -> 'ClientSettings':
        """
        Build settings from COLORD_CLIENT_* environment variables

        :param environ: mapping to read from, defaults to os.environ
        """
        if environ is None:
            environ = os.environ

        return cls(timeout=_parse_timeout(environ.get(ENV_TIMEOUT)),
                   debug=_parse_bool(environ.get(ENV_DEBUG)),
                   color=_parse_bool(environ.get(ENV_COLOR)))


    def apply_logging(self):
        """
        Push the logging related settings into the Log module
        """
        if self.color:
            Log.enable_color(True)
        if self.debug:
            Log.set_level(logging.DEBUG)
