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

import asyncio
from unittest import mock

from diskprep.controllers import DeviceController
from diskprep.core import DiskPrep
from diskprep.tests.fakes import DEVICES
from diskprep.tests.test_wizard import make_opts
from diskprep.ui.views.device import DeviceView
from diskprepcore.tests import DiskPrepTestCase


class TestDiskPrep(DiskPrepTestCase):
    def make_app(self, **kw):
        app = DiskPrep(make_opts(**kw), DEVICES)
        self.addCleanup(asyncio.set_event_loop, None)
        self.addCleanup(app.aio_loop.close)
        app.exit = mock.Mock()
        return app

    def test_dry_run_root(self):
        app = self.make_app()
        self.assertEqual(".diskprep", app.root)
        self.assertEqual(".diskprep/etc/fstab", app.operations.fstab_path)

    def test_screens_in_order(self):
        app = self.make_app()
        app.controllers.load_all()
        self.assertEqual(
            ["Device", "MountPoint", "Permissions", "Provision"],
            [c.name for c in app.controllers.instances],
        )
        app.next_screen()
        self.assertIsInstance(app.controllers.cur, DeviceController)
        self.assertIsInstance(app.ui.body, DeviceView)
        self.assertEqual(1, app.ui.progress_current)
        self.assertEqual(4, app.ui.progress_completion)

    def test_past_last_screen_exits(self):
        app = self.make_app()
        app.controllers.load_all()
        app.controllers.index = len(app.controllers.instances)
        app.next_screen()
        app.exit.assert_called_once_with()

    def test_no_exit_message_before_done(self):
        app = self.make_app()
        self.assertIsNone(app.exit_message())

    def test_redraw_requests_coalesce(self):
        app = self.make_app()
        app.urwid_loop = mock.Mock()
        app.request_screen_redraw()
        app.request_screen_redraw()
        app.aio_loop.run_until_complete(asyncio.sleep(0))
        app.urwid_loop.draw_screen.assert_called_once_with()

    def test_debug_flags_only_in_dry_run(self):
        with mock.patch.dict("os.environ", {"DISKPREP_DEBUG": "mount-fail"}):
            self.assertIn("mount-fail", self.make_app().debug_flags)
            self.assertEqual((), self.make_app(dry_run=False).debug_flags)
