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

""" View policy

Contains some default key navigations
"""

import logging

from urwid import WidgetWrap

log = logging.getLogger("diskprepcore.view")


class BaseView(WidgetWrap):

    title = ""
    excerpt = None
    footer = ""

    # Keys that leave the current screen. A view that must not be left
    # while it is showing clears this.
    cancel_keys = ("esc",)

    def cancel(self):
        pass

    def selectable(self):
        # Cancel keys must arrive even when nothing on screen takes focus.
        return True

    def keypress(self, size, key):
        key = super().keypress(size, key)
        if key in self.cancel_keys:
            self.cancel()
            return None
        return key
