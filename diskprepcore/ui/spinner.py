# Copyright 2017 Canonical, Ltd.
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

import asyncio
import logging

from urwid import Text

styles = {
    "spin": {
        "texts": ["-", "\\", "|", "/"],
        "rate": 0.1,
    },
    "braille": {
        "texts": ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"],
        "rate": 0.1,
    },
}


log = logging.getLogger("diskprepcore.ui.spinner")


class Spinner(Text):
    """An animation shown while waiting for something to finish.

    .start() shows the first glyph and arms a timer on the running event
    loop; each tick advances to the next glyph (wrapping around) and arms
    the next one. .stop() cancels the pending timer. A tick that was
    already on its way when .stop() ran finds the spinner stopped and
    neither changes the text nor arms another timer.
    """

    def __init__(self, style="spin", align="center", *, app=None):
        self.spin_index = 0
        self.spin_text = styles[style]["texts"]
        self.rate = styles[style]["rate"]
        self.app = app
        super().__init__("", align=align)
        self.running = False
        self._handle = None

    def spin(self):
        self.spin_index = (self.spin_index + 1) % len(self.spin_text)
        self.set_text(self.spin_text[self.spin_index])
        if self.app is not None:
            self.app.request_screen_redraw()

    def tick(self):
        self._handle = None
        if not self.running:
            log.debug("ignoring tick for stopped spinner %s", id(self))
            return
        self.spin()
        self._schedule()

    def _schedule(self):
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.rate, self.tick)

    def start(self):
        if self.running:
            return
        self.running = True
        self.set_text(self.spin_text[self.spin_index])
        self._schedule()

    def stop(self):
        self.running = False
        self.set_text("")
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
