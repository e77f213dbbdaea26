# Copyright 2018 Canonical, Ltd.
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

import logging

from diskprepcore.controller import BaseController

log = logging.getLogger("diskprep.controller")


class DiskPrepTuiController(BaseController):

    def __init__(self, app):
        super().__init__(app)
        self.session = app.base_model

    def make_ui(self):
        raise NotImplementedError

    def run_answers(self):
        pass

    def cancel(self):
        log.debug("%s: quitting", self.name)
        self.app.exit()

    def start_ui(self):
        self.ui.set_body(self.make_ui())
        if self.answers:
            self.app.aio_loop.call_soon(self.run_answers)
