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

import enum
import logging

from diskprep.common.filesystem import parse_permissions

log = logging.getLogger("diskprep.models.session")


class Phase(enum.Enum):
    CHOOSE_DEVICE = 1
    ENTER_MOUNT_POINT = 2
    ENTER_PERMISSIONS = 3
    EXECUTING = 4
    DONE = 5


class PhaseError(Exception):
    """A session transition or read happened out of phase order."""


class WizardSession:
    """What the operator has chosen so far, and where the wizard is.

    Each answer is recorded by the transition that leaves its phase, so
    the phases only ever move forward and every field is set at most
    once. Reading an answer before it has been given raises PhaseError.
    """

    def __init__(self, devices):
        self.devices = tuple(devices)
        self.phase = Phase.CHOOSE_DEVICE
        self._selected_device = None
        self._mount_point = None
        self._permission_text = None
        self._outcome = None

    def __repr__(self):
        return "<WizardSession phase={} devices={}>".format(
            self.phase.name, [d.path for d in self.devices])

    def _expect(self, phase, action):
        if self.phase is not phase:
            raise PhaseError(
                "cannot {} in phase {}".format(action, self.phase.name))

    def _after(self, phase, field):
        if self.phase.value <= phase.value:
            raise PhaseError(
                "{} is not known in phase {}".format(field, self.phase.name))

    def _advance(self):
        old = self.phase
        self.phase = Phase(old.value + 1)
        log.debug("phase %s -> %s", old.name, self.phase.name)

    # Transitions

    def choose_device(self, device):
        self._expect(Phase.CHOOSE_DEVICE, "choose a device")
        if device not in self.devices:
            raise ValueError("unknown device {}".format(device.path))
        self._selected_device = device
        self._advance()

    def set_mount_point(self, path):
        self._expect(Phase.ENTER_MOUNT_POINT, "set the mount point")
        self._mount_point = path
        self._advance()

    def set_permissions(self, text):
        self._expect(Phase.ENTER_PERMISSIONS, "set the permissions")
        self._permission_text = text
        self._advance()

    def finish(self, outcome):
        self._expect(Phase.EXECUTING, "record the outcome")
        self._outcome = outcome
        self._advance()

    # Accessors

    @property
    def selected_device(self):
        self._after(Phase.CHOOSE_DEVICE, "selected_device")
        return self._selected_device

    @property
    def mount_point(self):
        self._after(Phase.ENTER_MOUNT_POINT, "mount_point")
        return self._mount_point

    @property
    def permission_text(self):
        self._after(Phase.ENTER_PERMISSIONS, "permission_text")
        return self._permission_text

    @property
    def permission_mask(self):
        """The numeric mode; raises ValueError if the text does not parse."""
        return parse_permissions(self.permission_text)

    @property
    def outcome(self):
        self._after(Phase.EXECUTING, "outcome")
        return self._outcome

    @property
    def done(self):
        return self.phase is Phase.DONE
