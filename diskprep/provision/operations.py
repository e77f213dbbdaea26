# Copyright 2026 Canonical, Ltd.
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

"""The host side effects of provisioning, behind one interface.

The pipeline only sequences steps and classifies failures; everything
that touches the machine goes through a SystemOperations implementation.
"""

from abc import ABC, abstractmethod
import logging
import os
import uuid

from diskprep.provision.runner import get_command_runner
from diskprepcore.async_helpers import run_in_thread

log = logging.getLogger("diskprep.provision.operations")


def make_directory(path, mode):
    # Every directory created, parents included, gets the permission bits
    # of mode (the umask still applies). Existing directories are left
    # alone.
    mode &= 0o777
    missing = []
    path = os.path.abspath(path)
    while not os.path.isdir(path):
        missing.append(path)
        parent = os.path.dirname(path)
        if parent == path:
            break
        path = parent
    for path in reversed(missing):
        try:
            os.mkdir(path, mode)
        except FileExistsError:
            if not os.path.isdir(path):
                raise


def append_line(path, line):
    # O_APPEND without O_CREAT: a missing mount table is an error, not
    # something to create.
    fd = os.open(path, os.O_WRONLY | os.O_APPEND)
    with os.fdopen(fd, "w", encoding="utf-8") as fp:
        fp.write(line)


class SystemOperations(ABC):

    @abstractmethod
    async def format_device(self, device):
        """Create an ext4 filesystem on device."""

    @abstractmethod
    async def make_mount_point(self, path, mode):
        """Create path (and parents) as a directory, accepting one that
        already exists."""

    @abstractmethod
    async def mount(self, device, target):
        pass

    @abstractmethod
    async def get_uuid(self, device):
        """Return the filesystem UUID of device as reported by the host."""

    @abstractmethod
    async def append_fstab(self, line):
        pass

    @abstractmethod
    async def mount_all(self):
        """Mount everything in the mount table, checking the new entry."""


class HostOperations(SystemOperations):

    def __init__(self, runner, fstab_path="/etc/fstab"):
        self.runner = runner
        self.fstab_path = fstab_path

    async def format_device(self, device):
        await self.runner.run(["mkfs.ext4", device])

    async def make_mount_point(self, path, mode):
        await run_in_thread(make_directory, path, mode)

    async def mount(self, device, target):
        await self.runner.run(["mount", device, target])

    async def get_uuid(self, device):
        cp = await self.runner.run(
            ["blkid", "-s", "UUID", "-o", "value", device])
        return cp.stdout.strip()

    async def append_fstab(self, line):
        log.debug("appending %r to %s", line, self.fstab_path)
        await run_in_thread(append_line, self.fstab_path, line)

    async def mount_all(self):
        await self.runner.run(["mount", "-a"])


class SimulatedFailure(Exception):
    pass


class DryRunOperations(HostOperations):
    """Operations for --dry-run.

    Commands go to a DryRunCommandRunner, which logs them instead of
    running them. Directories and the mount table are kept under root.
    Setting the debug flag "<step>-fail" (format, mkdir, mount, uuid,
    fstab or verify) makes that step fail.
    """

    def __init__(self, runner, root, debug_flags=()):
        super().__init__(runner, os.path.join(root, "etc", "fstab"))
        self.root = root
        self.debug_flags = debug_flags

    def _check_flag(self, step):
        if "{}-fail".format(step) in self.debug_flags:
            raise SimulatedFailure("simulated {} failure".format(step))

    def _rebase(self, path):
        return os.path.join(self.root, path.lstrip("/"))

    def _ensure_root(self):
        os.makedirs(self.root, exist_ok=True)

    def _ensure_fstab(self):
        os.makedirs(os.path.dirname(self.fstab_path), exist_ok=True)
        if not os.path.exists(self.fstab_path):
            open(self.fstab_path, "w").close()

    async def format_device(self, device):
        self._check_flag("format")
        await super().format_device(device)

    async def make_mount_point(self, path, mode):
        self._check_flag("mkdir")
        # The dry-run root is ours, not part of the requested mount point.
        await run_in_thread(self._ensure_root)
        await super().make_mount_point(self._rebase(path), mode)

    async def mount(self, device, target):
        self._check_flag("mount")
        await super().mount(device, target)

    async def get_uuid(self, device):
        self._check_flag("uuid")
        await super().get_uuid(device)
        return str(uuid.uuid5(uuid.NAMESPACE_URL, "file://" + device))

    async def append_fstab(self, line):
        self._check_flag("fstab")
        await run_in_thread(self._ensure_fstab)
        await super().append_fstab(line)

    async def mount_all(self):
        self._check_flag("verify")
        await super().mount_all()


def get_operations(app):
    runner = get_command_runner(app)
    if app.opts.dry_run:
        return DryRunOperations(runner, app.root, app.debug_flags)
    return HostOperations(runner, app.opts.fstab)
