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

import logging

from diskprep.controller import DiskPrepTuiController
from diskprep.models.session import Phase
from diskprep.ui.views.device import DeviceView

log = logging.getLogger("diskprep.controllers.device")


class DeviceController(DiskPrepTuiController):

    def make_ui(self):
        return DeviceView(self, self.session.devices)

    def run_answers(self):
        path = self.answers.get("device")
        for device in self.session.devices:
            if device.path == path:
                self.done(device)
                return
        log.debug("answers name unknown device %r", path)

    def done(self, device):
        if device is None:
            log.debug("no device selected")
            return
        if self.session.phase is not Phase.CHOOSE_DEVICE:
            return
        log.debug("DeviceController.done %s next_screen", device.path)
        self.session.choose_device(device)
        self.app.next_screen()
