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

from urwid import Text

from diskprepcore.ui.buttons import quit_btn
from diskprepcore.ui.container import ListBox, Pile
from diskprepcore.ui.spinner import Spinner
from diskprepcore.ui.utils import Color, button_pile, screen
from diskprepcore.view import BaseView

log = logging.getLogger("diskprep.ui.views.progress")


class ProgressView(BaseView):
    title = _("Formatting and mounting")
    footer = _("Please wait.")

    def __init__(self, controller, spinner_style="braille"):
        self.controller = controller
        # Nothing leaves this screen until the pipeline has finished.
        self.cancel_keys = ()
        self.spinner = Spinner(spinner_style, app=controller.app)
        self.status = Text(_("Formatting and mounting the disk..."))
        self.status_row = Pile([self.status, self.spinner])
        self.buttons = button_pile([])
        super().__init__(screen(ListBox([self.status_row]), self.buttons))

    def show_result(self, result):
        if result.ok:
            text = _("Disk successfully formatted and mounted!")
            row = Color.info_primary(Text(text))
        else:
            text = _("Error: {summary}").format(summary=result.summary)
            row = Color.info_error(Text(text))
        self.status_row.contents[:] = [
            (row, self.status_row.options()),
            (Text(""), self.status_row.options()),
            (Text(_("Press q to quit.")), self.status_row.options()),
        ]
        pile = self.buttons.original_widget
        pile.contents[:] = [
            (quit_btn(on_press=self.quit), pile.options("pack")),
        ]
        self._w.focus_position = 3
        self.cancel_keys = ("esc", "q")

    def quit(self, sender):
        self.controller.cancel()

    def cancel(self):
        self.controller.cancel()
