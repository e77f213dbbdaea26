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

import logging

from diskprep.models.session import WizardSession
from diskprep.provision.operations import get_operations
from diskprepcore.core import Application

log = logging.getLogger("diskprep.core")


class DiskPrep(Application):

    project = "diskprep"

    controllers = [
        "Device",
        "MountPoint",
        "Permissions",
        "Provision",
    ]

    def __init__(self, opts, devices):
        self.devices = devices
        super().__init__(opts)
        self.operations = get_operations(self)

    def make_model(self):
        return WizardSession(self.devices)

    @property
    def session(self):
        return self.base_model

    def exit_message(self):
        """The line to print once the UI is gone, or None.

        Only a wizard that got as far as running the pipeline has
        something to report.
        """
        if not self.session.done:
            return None
        outcome = self.session.outcome
        if outcome.ok:
            return _("Program completed successfully!")
        return _("An error occurred: {summary}").format(
            summary=outcome.summary)
