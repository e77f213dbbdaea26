# Copyright 2020 Canonical, Ltd.
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
import enum
import time


class Status(enum.Enum):
    SUCCESS = enum.auto()
    FAIL = enum.auto()


class Context:
    """A named, nestable span of work whose start and finish get reported.

    Contexts form a tree rooted at the application; a context's full name
    is the path of names from the root, e.g. "diskprep/Provision/mount".
    Start and finish go to app.report_start_event and
    app.report_finish_event at the context's level (a logging level
    name). Children default to the parent's childlevel.

    Use it as a context manager:

        with ctx.child("mount") as context:
            await mount(device, target)

    or call enter() and exit() when the two ends happen in different
    places, as with screens.
    """

    def __init__(self, app, name, description, parent, level,
                 childlevel=None):
        self.app = app
        self.name = name
        self.description = description
        self.parent = parent
        self.level = level
        self.childlevel = level if childlevel is None else childlevel
        self.started = None

    @classmethod
    def new(cls, app):
        return cls(app, app.project, "", None, "INFO")

    def child(self, name, description="", level=None, childlevel=None):
        return Context(
            self.app, name, description, self,
            self.childlevel if level is None else level, childlevel)

    def full_name(self):
        if self.parent is None:
            return self.name
        return self.parent.full_name() + "/" + self.name

    def elapsed(self):
        """Seconds since enter(), or None if not entered."""
        if self.started is None:
            return None
        return time.monotonic() - self.started

    def enter(self, description=None):
        self.started = time.monotonic()
        self.app.report_start_event(
            self.full_name(), description or self.description, self.level)

    def exit(self, description=None, result=Status.SUCCESS):
        self.app.report_finish_event(
            self.full_name(), description or self.description, result,
            self.level)

    def __enter__(self):
        self.enter()
        return self

    def __exit__(self, exc, value, tb):
        if exc is None:
            self.exit()
        elif isinstance(value, asyncio.CancelledError):
            self.exit("cancelled", Status.FAIL)
        else:
            self.exit(str(value), Status.FAIL)
