# Copyright 2019 Canonical, Ltd.
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
import shutil
import tempfile
import unittest


class TestHelpers:

    def tmp_dir(self, dir=None, cleanup=True):
        if dir:
            os.makedirs(dir, exist_ok=True)
        d = tempfile.mkdtemp(prefix="diskprep-", dir=dir)
        if cleanup:
            self.addCleanup(shutil.rmtree, d)
        return d

    def tmp_path(self, path, dir=None):
        # return an absolute path to 'path' under dir.
        # if dir is None, one will be created with tmp_dir()
        # the file is not created or modified.
        if dir is None:
            dir = self.tmp_dir()
        return os.path.normpath(os.path.abspath(os.path.join(dir, path)))

    def write_file(self, path, content=""):
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w") as fp:
            fp.write(content)
        return path

    def assert_contents(self, path, expected_contents):
        with open(path, "r") as fp:
            self.assertEqual(expected_contents, fp.read())


class DiskPrepTestCase(TestHelpers, unittest.TestCase):
    pass


class DiskPrepAsyncTestCase(TestHelpers, unittest.IsolatedAsyncioTestCase):
    pass
