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

log = logging.getLogger("diskprep.controllers.permissions")


class PermissionsController(DiskPrepTuiController):

    def make_ui(self):
        return LineEntryView(
            self,
            title=_("Permissions"),
            excerpt=_(
                "Permissions for {path}, as an octal mode. Confirming "
                "starts formatting {device}; all data on it will be "
                "lost.").format(
                    path=self.session.mount_point,
                    device=self.session.selected_device.path),
            prompt=_("Enter permissions (e.g., 0755): "))

    def run_answers(self):
        if "mode" not in self.answers:
            return
        mode = self.answers["mode"]
        if isinstance(mode, int):
            # An unquoted 0755 has already been read as an octal number.
            mode = "{:04o}".format(mode)
        self.done(mode)

    def done(self, text):
        if self.session.phase is not Phase.ENTER_PERMISSIONS:
            return
        log.debug("PermissionsController.done %r next_screen", text)
        self.session.set_permissions(text)
        self.app.next_screen()
