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
from diskprep.ui.views.entry import LineEntryView

log = logging.getLogger("diskprep.controllers.mountpoint")


class MountPointController(DiskPrepTuiController):

    def make_ui(self):
        return LineEntryView(
            self,
            title=_("Mount point"),
            excerpt=_(
                "{device} will be formatted as ext4 and mounted at the "
                "directory entered below. The directory is created if it "
                "does not exist.").format(
                    device=self.session.selected_device.path),
            prompt=_("Enter mount point (e.g., /mnt/data): "))

    def run_answers(self):
        if "path" in self.answers:
            self.done(self.answers["path"])

    def done(self, path):
        if self.session.phase is not Phase.ENTER_MOUNT_POINT:
            return
        log.debug("MountPointController.done %r next_screen", path)
        self.session.set_mount_point(path)
        self.app.next_screen()
