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

""" Device

Choose the block device to provision.
"""

import logging

from urwid import Text

from diskprepcore.ui.buttons import menu_btn
from diskprepcore.ui.container import ListBox
from diskprepcore.ui.utils import Color, screen
from diskprepcore.view import BaseView

log = logging.getLogger("diskprep.ui.views.device")


class DeviceView(BaseView):
    title = _("Select a disk to format")
    footer = _("Use UP, DOWN and ENTER to choose a disk; ESC or q quits.")
    cancel_keys = ("esc", "q")

    def __init__(self, controller, devices):
        self.controller = controller
        self.devices = devices
        if devices:
            rows = [
                menu_btn(label=device.path, on_press=self.choose,
                         user_arg=device)
                for device in devices
            ]
        else:
            rows = [Color.info_error(Text(_("No block devices found.")))]
        self.listbox = ListBox(rows)
        super().__init__(screen(
            self.listbox,
            excerpt=_(
                "The chosen disk will be formatted as ext4. All data on it "
                "will be lost.")))

    def choose(self, sender, device):
        self.controller.done(device)

    def keypress(self, size, key):
        key = super().keypress(size, key)
        if key == "enter":
            # Only reached when there is no device button to take it.
            self.controller.done(None)
            return None
        return key

    def cancel(self):
        self.controller.cancel()
