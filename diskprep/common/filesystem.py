# Copyright 2026 Canonical, Ltd.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import re

# Any run of octal digits, as long as the value fits in 32 bits.
OCTAL_MODE = re.compile("[0-7]+")
MAX_MODE = 0xFFFFFFFF

FSTAB_FSTYPE = "ext4"
FSTAB_OPTIONS = "defaults,nofail"


def parse_permissions(text):
    """Parse an octal permission string such as "0755" into an int.

    Raises ValueError for anything but octal digits or for a value that
    does not fit in 32 bits.
    """
    if not OCTAL_MODE.fullmatch(text):
        raise ValueError("{!r} is not an octal number".format(text))
    mode = int(text, 8)
    if mode > MAX_MODE:
        raise ValueError("{!r} is out of range".format(text))
    return mode


def fstab_line(uuid, mount_point, fstype=FSTAB_FSTYPE, options=FSTAB_OPTIONS,
               dump=0, passno=2):
    return "UUID={} {} {} {} {} {}\n".format(
        uuid, mount_point, fstype, options, dump, passno)
