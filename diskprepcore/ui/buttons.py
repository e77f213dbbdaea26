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

from functools import partial

from urwid import AttrMap, Button, Text, connect_signal


class PlainButton(Button):
    button_left = Text("[")
    button_right = Text("]")


class MenuSelectButton(Button):
    button_left = Text("")
    button_right = Text(">")


def plain_btn(label, color, on_press=None, user_arg=None):
    button = PlainButton(label=label)
    if on_press is not None:
        connect_signal(button, "click", on_press, user_arg)
    return AttrMap(button, color, color + " focus")


quit_btn = partial(plain_btn, label=_("Quit"), color="done_button")


def menu_btn(label, on_press=None, user_arg=None):
    button = MenuSelectButton(label=label)
    if on_press is not None:
        connect_signal(button, "click", on_press, user_arg)
    return AttrMap(button, "menu_button", "menu_button focus")
