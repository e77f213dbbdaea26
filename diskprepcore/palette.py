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

""" Palette Loader """


def apply_default_colors(cls):
    color_map = {
        "dark_magenta": "dark magenta",
        "light_magenta": "light magenta",
        "dark_green": "dark green",
        "white": "white",
        "black": "black",
        "light_gray": "light gray",
        "dark_gray": "dark gray",
        "dark_red": "dark red",
        "light_red": "light red",
    }
    for k, v in color_map.items():
        setattr(cls, k, v)
    return cls


@apply_default_colors
class Palette:
    pass


# Entries are (name, foreground, background, mono, foreground_high,
# background_high), the tuple urwid's register_palette takes.
STYLES = [
    ("frame_header", Palette.white, Palette.dark_magenta, "", "", ""),
    ("frame_footer", Palette.white, Palette.dark_magenta, "", "", ""),
    ("body", Palette.white, Palette.black, "", "", ""),
    ("menu_button", Palette.white, Palette.black, "", "", ""),
    ("menu_button focus", Palette.black, Palette.light_gray, "", "", ""),
    ("done_button", Palette.white, Palette.black, "", "", ""),
    ("done_button focus", Palette.black, Palette.dark_green, "", "", ""),
    ("cancel_button", Palette.white, Palette.black, "", "", ""),
    ("cancel_button focus", Palette.white, Palette.dark_red, "", "", ""),
    ("info_primary", Palette.white, Palette.black, "", "", ""),
    ("info_minor", Palette.light_gray, Palette.black, "", "", ""),
    ("info_error", Palette.light_red, Palette.black, "", "", ""),
    ("string_input", Palette.black, Palette.light_gray, "", "", ""),
    ("string_input focus", Palette.white, Palette.dark_gray, "", "", ""),
    ("progress_incomplete", Palette.white, Palette.dark_magenta, "", "", ""),
    ("progress_complete", Palette.white, Palette.light_magenta, "", "", ""),
]


STYLES_MONO = [
    ("frame_header", Palette.white, Palette.black, "", "", ""),
    ("frame_footer", Palette.white, Palette.black, "", "", ""),
    ("body", Palette.white, Palette.black, "", "", ""),
    ("menu_button", Palette.white, Palette.black, "", "", ""),
    ("menu_button focus", Palette.black, Palette.white, "", "", ""),
    ("done_button", Palette.white, Palette.black, "", "", ""),
    ("done_button focus", Palette.black, Palette.white, "", "", ""),
    ("cancel_button", Palette.white, Palette.black, "", "", ""),
    ("cancel_button focus", Palette.black, Palette.white, "", "", ""),
    ("info_primary", Palette.white, Palette.black, "", "", ""),
    ("info_minor", Palette.white, Palette.black, "", "", ""),
    ("info_error", Palette.white, Palette.black, "", "", ""),
    ("string_input", Palette.black, Palette.white, "", "", ""),
    ("string_input focus", Palette.black, Palette.white, "", "", ""),
    ("progress_incomplete", Palette.white, Palette.black, "", "", ""),
    ("progress_complete", Palette.black, Palette.white, "", "", ""),
]


PALETTE_COLOR = STYLES
PALETTE_MONO = STYLES_MONO
