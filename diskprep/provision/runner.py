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
import logging
import subprocess
from typing import List

from diskprepcore.utils import arun_command

log = logging.getLogger("diskprep.provision.runner")


class PrivilegedCommandRunner:
    """Run host commands that need root, through sudo unless told not to.

    A non-zero exit raises subprocess.CalledProcessError carrying the
    command's output.
    """

    def __init__(self, use_sudo: bool = True):
        self.prefix = ["sudo"] if use_sudo else []

    def _forge_cmd(self, cmd: List[str], privileged: bool) -> List[str]:
        if privileged:
            return self.prefix + list(cmd)
        return list(cmd)

    async def run(self, cmd: List[str], *, privileged: bool = True):
        forged = self._forge_cmd(cmd, privileged)
        log.debug("running %s", forged)
        return await arun_command(forged, check=True)


class DryRunCommandRunner(PrivilegedCommandRunner):

    def __init__(self, delay):
        super().__init__(use_sudo=False)
        self.delay = delay

    def _forge_cmd(self, cmd: List[str], privileged: bool) -> List[str]:
        return ["echo", "not running:"] + list(cmd)

    def _get_delay_for_cmd(self, cmd: List[str]) -> float:
        if "mkfs.ext4" in cmd:
            return 3 * self.delay
        else:
            return self.delay

    async def run(self, cmd: List[str], *, privileged: bool = True):
        cp = await super().run(cmd, privileged=privileged)
        log.debug(cp.stdout.strip())
        await asyncio.sleep(self._get_delay_for_cmd(cmd))
        return subprocess.CompletedProcess(cp.args, 0, "", "")


def get_command_runner(app):
    if app.opts.dry_run:
        return DryRunCommandRunner(1 / app.scale_factor)
    else:
        return PrivilegedCommandRunner(use_sudo=app.opts.use_sudo)
