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

import unittest
from unittest import mock

from diskprep.common.types import FailureKind
from diskprep.controllers.provision import ProvisionController
from diskprep.models.session import Phase, WizardSession
from diskprep.provision.pipeline import ProvisioningPipeline
from diskprep.tests.fakes import DEVICES, FakeOperations
from diskprep.ui.views.progress import ProgressView
from diskprepcore.testing.view_helpers import find_text_containing
from diskprepcore.tests.mocks import make_app


class TestProvisionController(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.session = WizardSession(DEVICES)
        self.session.choose_device(DEVICES[1])
        self.session.set_mount_point("/mnt/data")
        self.session.set_permissions("0755")
        self.app = make_app(self.session, operations=FakeOperations())
        self.controller = ProvisionController(self.app)

    async def run_pipeline(self):
        self.controller.start_ui()
        await self.controller.pipeline_task

    async def test_start_ui_launches_pipeline(self):
        self.controller.start_ui()
        view = self.app.ui.set_body.call_args[0][0]
        self.assertIsInstance(view, ProgressView)
        self.assertTrue(view.spinner.running)
        self.assertIs(Phase.EXECUTING, self.session.phase)
        await self.controller.pipeline_task
        self.assertIs(Phase.DONE, self.session.phase)
        self.assertTrue(self.session.outcome.ok)
        self.assertFalse(view.spinner.running)

    async def test_launched_once(self):
        await self.run_pipeline()
        task = self.controller.pipeline_task
        self.controller.start_ui()
        self.assertIs(task, self.controller.pipeline_task)
        self.assertEqual(1, self.app.operations.called.count("format_device"))

    async def test_escape_ignored_while_executing(self):
        self.controller.start_ui()
        self.controller.cancel()
        self.app.exit.assert_not_called()
        await self.controller.pipeline_task

    async def test_quit_when_done(self):
        await self.run_pipeline()
        self.controller.cancel()
        self.app.exit.assert_called_once_with()

    async def test_failure_shown(self):
        self.app.operations = FakeOperations(
            failures={"mount": OSError("device busy")})
        await self.run_pipeline()
        outcome = self.session.outcome
        self.assertIs(FailureKind.MOUNT_FAILED, outcome.kind)
        self.assertEqual("device busy", outcome.cause)
        view = self.controller.progress_view
        self.assertIsNotNone(find_text_containing(
            view, "Error: failed to mount disk: device busy"))

    async def test_crash_outside_steps_still_finishes(self):
        with mock.patch.object(
                ProvisioningPipeline, "execute",
                side_effect=RuntimeError("context exploded")):
            with self.assertLogs(
                    "diskprep.controllers.provision", "ERROR"):
                await self.run_pipeline()
        self.assertIs(Phase.DONE, self.session.phase)
        outcome = self.session.outcome
        self.assertIs(FailureKind.UNEXPECTED, outcome.kind)
        self.assertIsNone(outcome.step)
        self.assertEqual(
            "provisioning stopped unexpectedly: context exploded",
            outcome.summary)
        self.assertFalse(self.controller.progress_view.spinner.running)
        self.controller.cancel()
        self.app.exit.assert_called_once_with()

    async def test_late_tick_after_done(self):
        await self.run_pipeline()
        spinner = self.controller.progress_view.spinner
        index = spinner.spin_index
        redraws = self.app.request_screen_redraw.call_count
        spinner.tick()
        self.assertEqual(index, spinner.spin_index)
        self.assertIsNone(spinner._handle)
        self.assertEqual(redraws, self.app.request_screen_redraw.call_count)
        self.assertIs(Phase.DONE, self.session.phase)

    async def test_answers_quit(self):
        self.app.answers = {"Provision": {"quit": True}}
        self.controller = ProvisionController(self.app)
        await self.run_pipeline()
        self.app.aio_loop.call_soon.assert_called_with(self.controller.cancel)
