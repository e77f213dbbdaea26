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

import importlib
import logging

log = logging.getLogger("diskprepcore.controllerset")


class ControllerSet:
    """The ordered screens of an application.

    Controllers are named without their "Controller" suffix and looked
    up as attributes of the controllers module.
    """

    def __init__(self, controllers_mod, names, init_args=()):
        self.controllers_mod = controllers_mod
        self.controller_names = names[:]
        self.init_args = init_args
        self.index = -1
        self.instances = []

    def _get_controller_class(self, name):
        return getattr(self.controllers_mod, name + "Controller")

    def load(self, name):
        self.controller_names.remove(name)
        log.debug("Importing controller: %s", name)
        inst = self._get_controller_class(name)(*self.init_args)
        setattr(self, name, inst)
        self.instances.append(inst)

    def load_all(self):
        while self.controller_names:
            self.load(self.controller_names[0])

    @property
    def cur(self):
        if self.out_of_bounds():
            return None
        return self.instances[self.index]

    def out_of_bounds(self):
        return self.index < 0 or self.index >= len(self.instances)


def import_controllers(project):
    return importlib.import_module("{}.controllers".format(project))
