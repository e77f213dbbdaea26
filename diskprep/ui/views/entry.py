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

""" Line entry

A single line of free text, confirmed with ENTER.
"""

import logging

from urwid import Text

from diskprepcore.ui.container import Columns, ListBox
from diskprepcore.ui.interactive import StringEditor
from diskprepcore.ui.utils import Color, screen
from diskprepcore.view import BaseView

log = logging.getLogger("diskprep.ui.views.entry")


class LineEntryView(BaseView):
    footer = _("Press ENTER to confirm; ESC quits.")

    def __init__(self, controller, title, prompt, excerpt=None):
        self.controller = controller
        self.title = title
        self.editor = StringEditor()
        row = Columns([
            ("pack", Text(prompt)),
            Color.string_input(self.editor),
        ])
        super().__init__(screen(ListBox([row]), excerpt=excerpt))

    def keypress(self, size, key):
        key = super().keypress(size, key)
        if key == "enter":
            self.controller.done(self.editor.value)
            return None
        return key

    def cancel(self):
        self.controller.cancel()
