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

import os
import stat
import subprocess
import uuid
from unittest import mock

from diskprep.provision.operations import (
    DryRunOperations,
    HostOperations,
    SimulatedFailure,
    append_line,
    get_operations,
    make_directory,
)
from diskprep.provision.runner import DryRunCommandRunner
from diskprepcore.tests import DiskPrepAsyncTestCase, DiskPrepTestCase
from diskprepcore.tests.mocks import make_app


class TestMakeDirectory(DiskPrepTestCase):
    def setUp(self):
        old = os.umask(0o022)
        self.addCleanup(os.umask, old)

    def test_creates_parents_with_mode(self):
        path = self.tmp_path("a/b/data")
        make_directory(path, 0o755)
        self.assertTrue(os.path.isdir(path))
        self.assertEqual(0o755, stat.S_IMODE(os.stat(path).st_mode))

    def test_parents_get_the_same_mode(self):
        top = self.tmp_dir()
        make_directory(os.path.join(top, "new", "data"), 0o700)
        parent = os.path.join(top, "new")
        for path in parent, os.path.join(parent, "data"):
            self.assertEqual(0o700, stat.S_IMODE(os.stat(path).st_mode))

    def test_existing_parent_untouched(self):
        top = self.tmp_dir()
        os.chmod(top, 0o755)
        make_directory(os.path.join(top, "data"), 0o700)
        self.assertEqual(0o755, stat.S_IMODE(os.stat(top).st_mode))
        self.assertEqual(
            0o700, stat.S_IMODE(os.stat(os.path.join(top, "data")).st_mode))

    def test_relative_path(self):
        top = self.tmp_dir()
        old = os.getcwd()
        os.chdir(top)
        self.addCleanup(os.chdir, old)
        make_directory("mnt/data", 0o750)
        self.assertEqual(
            0o750, stat.S_IMODE(os.stat(os.path.join(top, "mnt")).st_mode))

    def test_only_permission_bits(self):
        path = self.tmp_path("data")
        make_directory(path, 0o40750)
        self.assertEqual(0o750, stat.S_IMODE(os.stat(path).st_mode))

    def test_existing_directory_ok(self):
        path = self.tmp_dir()
        make_directory(path, 0o755)
        self.assertTrue(os.path.isdir(path))

    def test_existing_file_fails(self):
        path = self.write_file(self.tmp_path("data"), "x")
        with self.assertRaises(FileExistsError):
            make_directory(path, 0o755)


class TestAppendLine(DiskPrepTestCase):
    def test_appends(self):
        path = self.write_file(self.tmp_path("fstab"), "# existing\n")
        append_line(path, "UUID=1 /mnt/data ext4 defaults,nofail 0 2\n")
        self.assert_contents(
            path, "# existing\nUUID=1 /mnt/data ext4 defaults,nofail 0 2\n")

    def test_missing_file_not_created(self):
        path = self.tmp_path("fstab")
        with self.assertRaises(FileNotFoundError):
            append_line(path, "UUID=1 /mnt/data ext4 defaults,nofail 0 2\n")
        self.assertFalse(os.path.exists(path))


class TestHostOperations(DiskPrepAsyncTestCase):
    def setUp(self):
        self.runner = mock.AsyncMock()
        self.fstab = self.write_file(self.tmp_path("fstab"))
        self.ops = HostOperations(self.runner, self.fstab)

    async def test_commands(self):
        self.runner.run.return_value = subprocess.CompletedProcess(
            [], 0, "1234-5678\n", "")
        await self.ops.format_device("/dev/sdb")
        await self.ops.mount("/dev/sdb", "/mnt/data")
        self.assertEqual("1234-5678", await self.ops.get_uuid("/dev/sdb"))
        await self.ops.mount_all()
        self.assertEqual(
            [
                mock.call(["mkfs.ext4", "/dev/sdb"]),
                mock.call(["mount", "/dev/sdb", "/mnt/data"]),
                mock.call(["blkid", "-s", "UUID", "-o", "value", "/dev/sdb"]),
                mock.call(["mount", "-a"]),
            ],
            self.runner.run.call_args_list,
        )

    async def test_append_fstab(self):
        await self.ops.append_fstab("line\n")
        self.assert_contents(self.fstab, "line\n")


class TestDryRunOperations(DiskPrepAsyncTestCase):
    def setUp(self):
        self.root = self.tmp_dir()
        self.runner = DryRunCommandRunner(delay=0)
        self.ops = DryRunOperations(self.runner, self.root)

    async def test_mount_point_under_root(self):
        await self.ops.make_mount_point("/mnt/data", 0o755)
        self.assertTrue(os.path.isdir(os.path.join(self.root, "mnt/data")))

    async def test_restrictive_mode_spares_root(self):
        old = os.umask(0o022)
        self.addCleanup(os.umask, old)
        root = os.path.join(self.tmp_dir(), ".diskprep")
        ops = DryRunOperations(self.runner, root)
        await ops.make_mount_point("/mnt/data", 0o700)
        self.assertEqual(0o755, stat.S_IMODE(os.stat(root).st_mode))
        self.assertEqual(
            0o700, stat.S_IMODE(os.stat(os.path.join(root, "mnt")).st_mode))
        await ops.append_fstab("line\n")
        self.assert_contents(os.path.join(root, "etc/fstab"), "line\n")

    async def test_fstab_under_root(self):
        await self.ops.append_fstab("line\n")
        self.assert_contents(os.path.join(self.root, "etc/fstab"), "line\n")

    async def test_uuid_derived_from_device(self):
        value = await self.ops.get_uuid("/dev/sdb")
        self.assertEqual(value, await self.ops.get_uuid("/dev/sdb"))
        self.assertNotEqual(value, await self.ops.get_uuid("/dev/sda"))
        uuid.UUID(value)

    async def test_debug_flag_fails_step(self):
        ops = DryRunOperations(self.runner, self.root, ["mount-fail"])
        await ops.format_device("/dev/sdb")
        with self.assertRaises(SimulatedFailure):
            await ops.mount("/dev/sdb", "/mnt/data")


class TestGetOperations(DiskPrepTestCase):
    def test_dry_run(self):
        app = make_app(debug_flags=["fstab-fail"])
        ops = get_operations(app)
        self.assertIsInstance(ops, DryRunOperations)
        self.assertEqual(".diskprep-test/etc/fstab", ops.fstab_path)
        self.assertEqual(["fstab-fail"], ops.debug_flags)

    def test_host(self):
        app = make_app(dry_run=False)
        app.opts.use_sudo = False
        ops = get_operations(app)
        self.assertIs(type(ops), HostOperations)
        self.assertEqual("/etc/fstab", ops.fstab_path)
