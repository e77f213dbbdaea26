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

from abc import ABC, abstractmethod
import logging

log = logging.getLogger("diskprepcore.controller")


class BaseController(ABC):
    """Base class for controllers."""

    def __init__(self, app):
        self.name = type(self).__name__[: -len("Controller")]
        self.ui = app.ui
        self.opts = app.opts
        self.app = app
        self.context = self.app.context.child(self.name, childlevel="DEBUG")
        self.answers = app.answers.get(self.name, {})

    def start(self):
        """Called just before the main loop is started.

        At the time this is called, all controllers have been created.
        """
        pass

    @abstractmethod
    def cancel(self):
        pass

    @abstractmethod
    def start_ui(self):
        """Start running this controller's UI.

        This method should call self.ui.set_body.
        """

    def end_ui(self):
        """Stop running this controller's UI.

        The next controller is about to replace the UI so nothing needs to
        be removed here; it is a hook to stop background work that only
        matters while the screen is visible.
        """
