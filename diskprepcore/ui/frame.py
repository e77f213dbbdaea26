# Copyright 2015 Canonical, Ltd.
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

""" Base Frame Widget """

import logging

from urwid import (
    Text,
    WidgetWrap,
)

from diskprepcore.ui.anchors import Footer, Header
from diskprepcore.ui.container import ListBox, Pile
from diskprepcore.ui.utils import Color

log = logging.getLogger("diskprepcore.ui.frame")


class DiskPrepCoreUI(WidgetWrap):

    def __init__(self):
        self.header = Header("")
        self.footer = Footer("", 0, 1)
        self.progress_current = 0
        self.progress_completion = 1
        self.pile = Pile([
            ("pack", self.header),
            ListBox([Text("")]),
            ("pack", self.footer),
        ])
        super().__init__(Color.body(self.pile))

    def _assign_contents(self, i, w):
        self.pile.contents[i] = (w, self.pile.contents[i][1])

    def set_header(self, title=None):
        self._assign_contents(0, Header(title))

    def set_footer(self, message):
        self._assign_contents(
            2, Footer(message, self.progress_current, self.progress_completion))

    def set_progress(self, current, completion):
        self.progress_current = current
        self.progress_completion = completion

    @property
    def body(self):
        return self.pile.contents[1][0]

    def set_body(self, widget):
        self.set_header(_(widget.title))
        self._assign_contents(1, widget)
        self.pile.focus_position = 1
        self.set_footer(_(widget.footer))
