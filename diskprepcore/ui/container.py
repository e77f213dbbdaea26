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

# The tab-cycling containers are adapted from
# https://github.com/pimutils/khal/commit/bd7c5f928a7670de9afae5657e66c6dc846688ac, which has this license:
#
# Copyright (c) 2013-2015 Christian Geier et al.
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of
# this software and associated documentation files (the "Software"), to deal in
# the Software without restriction, including without limitation the rights to
# use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of
# the Software, and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS
# FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR
# COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER
# IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

import logging

import urwid

log = logging.getLogger("diskprepcore.ui.container")


# Enter confirms the current screen in this application, so unlike a
# form-heavy UI it must not be remapped to move focus; only tab does.
tab_cycling_command_map = urwid.command_map.copy()
tab_cycling_command_map["tab"] = "next selectable"
tab_cycling_command_map["shift tab"] = "prev selectable"


def _maybe_call(w, methname):
    if w is None:
        return
    m = getattr(w.base_widget, methname, None)
    if m is not None:
        m()


class TabCyclingMixin:
    """Tab-cycling implementation that works with Pile and Columns."""

    _command_map = tab_cycling_command_map

    def _select_first_selectable(self):
        """Select first selectable child (possibily recursively)."""
        for i, (w, o) in enumerate(self.contents):
            if w.selectable():
                self.focus_position = i
                _maybe_call(w, "_select_first_selectable")
                return

    def keypress(self, size, key):
        key = super().keypress(size, key)

        if len(self.contents) == 0:
            return key

        if self._command_map[key] == "next selectable":
            next_fp = self.focus_position + 1
            for i, (w, o) in enumerate(self.contents[next_fp:], next_fp):
                if w.selectable():
                    self.focus_position = i
                    _maybe_call(w, "_select_first_selectable")
                    return None
            self._select_first_selectable()
        return key


class TabCyclingPile(TabCyclingMixin, urwid.Pile):
    pass


class TabCyclingColumns(TabCyclingMixin, urwid.Columns):
    pass


class TabCyclingListBox(urwid.ListBox):
    _command_map = tab_cycling_command_map

    def __init__(self, body):
        # urwid.ListBox converts an arbitrary sequence argument to a
        # PollingListWalker, which does not support the focus handling
        # below.
        if getattr(body, "get_focus", None) is None:
            body = urwid.SimpleFocusListWalker(body)
        super().__init__(body)

    def _select_first_selectable(self):
        """Select first selectable child (possibily recursively)."""
        for i, w in enumerate(self.body):
            if w.selectable():
                self.set_focus(i)
                _maybe_call(w, "_select_first_selectable")
                return

    def keypress(self, size, key):
        key = super().keypress(size, key)

        if len(self.body) == 0:
            return key

        if self._command_map[key] == "next selectable":
            next_fp = self.focus_position + 1
            for i, w in enumerate(self.body[next_fp:], next_fp):
                if w.selectable():
                    self.set_focus(i)
                    _maybe_call(w, "_select_first_selectable")
                    return None
            self._select_first_selectable()
        return key


Columns = TabCyclingColumns
Pile = TabCyclingPile
ListBox = TabCyclingListBox
