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
# pylint: disable=invalid-name

# Well known names of the daemon. These are fixed by the daemon and
# are not configurable.
SERVICE = 'org.freedesktop.ColorManager'
PATH = '/org/freedesktop/ColorManager'
INTERFACE = 'org.freedesktop.ColorManager'
DEVICE_INTERFACE = 'org.freedesktop.ColorManager.Device'
PROFILE_INTERFACE = 'org.freedesktop.ColorManager.Profile'
PROPERTIES_INTERFACE = 'org.freedesktop.DBus.Properties'
