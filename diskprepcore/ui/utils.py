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

""" UI utilities """

from functools import partialmethod

from urwid import (
    AttrMap,
    Button,
    Padding as _Padding,
    Text,
)

from diskprepcore.palette import STYLES
from diskprepcore.ui.container import ListBox, Pile


class Padding:
    """ Padding methods

    .. py:meth:: center_X(:class:`urwid.Widget`)

       Center a widget with X being the relative width of the widget.
    """

    center_60 = partialmethod(
        _Padding, align="center", width=("relative", 60))
    center_79 = partialmethod(
        _Padding, align="center", width=("relative", 79))
    line_break = partialmethod(Text)


STYLE_NAMES = set(style[0] for style in STYLES)


def apply_style_map(cls):
    """ Applies AttrMap attributes to Color class

    Eg:

      Color.frame_header(Text("I'm text in the frame header"))
      Color.info_error(Text("I'm text in the error color"))
    """
    for k in STYLE_NAMES:
        kf = k + " focus"
        if kf in STYLE_NAMES:
            setattr(cls, k, partialmethod(AttrMap, attr_map=k, focus_map=kf))
        else:
            setattr(cls, k, partialmethod(AttrMap, attr_map=k))
    return cls


@apply_style_map
class Color:
    """ Partial methods for :class:`~diskprepcore.palette.STYLES` """

    pass


def button_pile(buttons):
    max_label = 10
    for button in buttons:
        button = button.base_widget
        if not isinstance(button, Button):
            raise RuntimeError(
                "button_pile takes a list of buttons, not %s" % button)
        max_label = max(len(button.label), max_label)
    width = max_label + 4
    return _Padding(Pile(buttons), min_width=width, width=width, align="center")


def screen(rows, buttons=None, excerpt=None):
    """Helper to create a common screen layout.

    The commonest screen layout is:

        [ 1 line padding ]
        excerpt (optional)
        [ 1 line padding ]
        Listbox()
        [ 1 line padding ]
        a button_pile (optional)
        [ 1 line padding ]

    This helper makes creating this a 1-liner.
    """
    if isinstance(rows, list):
        rows = ListBox(rows)
    body = []
    if excerpt is not None:
        body = [
            ("pack", Text("")),
            ("pack", Padding.center_79(Text(excerpt))),
        ]
    body.extend([
        ("pack", Text("")),
        Padding.center_79(rows),
        ("pack", Text("")),
    ])
    if buttons is not None:
        body.extend([
            ("pack", buttons),
            ("pack", Text("")),
        ])
    return Pile(body)
