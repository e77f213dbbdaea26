# Copyright 2018 Canonical, Ltd.
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

import logging

import yaml

from diskprep.common.types import DeviceDescriptor
from diskprepcore.utils import run_command

log = logging.getLogger("diskprep.prober")

LSBLK_CMD = ["lsblk", "-dn", "-o", "NAME"]
DEV_DIR = "/dev/"


class EnumerationError(Exception):
    """The block devices of this machine could not be listed."""


def parse_lsblk_output(output):
    """Turn `lsblk -dn -o NAME` output into device descriptors."""
    devices = []
    for line in output.splitlines():
        name = line.strip()
        if not name:
            continue
        devices.append(DeviceDescriptor(DEV_DIR + name))
    return devices


class Prober:
    def __init__(self, machine_config=None, debug_flags=()):
        self.saved_config = None
        if machine_config is not None:
            try:
                self.saved_config = yaml.safe_load(machine_config)
            except yaml.YAMLError as e:
                raise EnumerationError(
                    "could not parse machine config: {}".format(e)) from e
        self.debug_flags = debug_flags
        log.debug("Prober() init finished, data:{}".format(self.saved_config))

    def _devices_from_config(self):
        names = None
        if isinstance(self.saved_config, dict):
            names = self.saved_config.get("devices")
        if not isinstance(names, list):
            raise EnumerationError("machine config has no list of devices")
        devices = []
        for name in names:
            name = str(name)
            if not name.startswith(DEV_DIR):
                name = DEV_DIR + name
            devices.append(DeviceDescriptor(name))
        return devices

    def get_devices(self):
        if "lsblk-fail" in self.debug_flags:
            raise EnumerationError("simulated lsblk failure")
        if self.saved_config is not None:
            return self._devices_from_config()
        try:
            cp = run_command(LSBLK_CMD)
        except OSError as e:
            raise EnumerationError("could not run lsblk: {}".format(e)) from e
        if cp.returncode != 0:
            raise EnumerationError(
                "lsblk exited with status {}: {}".format(
                    cp.returncode, cp.stderr.strip()))
        return parse_lsblk_output(cp.stdout)


def list_devices(machine_config=None, debug_flags=()):
    devices = Prober(machine_config, debug_flags).get_devices()
    log.debug("found devices %s", [d.path for d in devices])
    return devices
