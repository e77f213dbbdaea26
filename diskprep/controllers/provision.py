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

import logging

from diskprep.common.types import FailureKind, PipelineFailure
from diskprep.controller import DiskPrepTuiController
from diskprep.models.session import Phase
from diskprep.provision.pipeline import ProvisioningPipeline, describe_error
from diskprep.ui.views.progress import ProgressView
from diskprepcore.async_helpers import run_bg_task

log = logging.getLogger("diskprep.controllers.provision")


class ProvisionController(DiskPrepTuiController):

    def __init__(self, app):
        super().__init__(app)
        self.progress_view = None
        self.pipeline_task = None

    def make_ui(self):
        style = "spin" if self.opts.ascii else "braille"
        self.progress_view = ProgressView(self, spinner_style=style)
        return self.progress_view

    def start_ui(self):
        super().start_ui()
        if self.session.phase is Phase.EXECUTING and self.pipeline_task is None:
            self.progress_view.spinner.start()
            self.pipeline_task = run_bg_task(self._provision())

    def end_ui(self):
        if self.progress_view is not None:
            self.progress_view.spinner.stop()

    async def _provision(self):
        session = self.session
        pipeline = ProvisioningPipeline(
            self.app.operations, self.context.child("provision"))
        try:
            result = await pipeline.execute(
                session.selected_device.path,
                session.mount_point,
                session.permission_text)
        except Exception as exc:
            # The session must still reach DONE or the operator is stuck
            # on a screen that ignores quit.
            log.exception("provisioning pipeline crashed")
            result = PipelineFailure(
                kind=FailureKind.UNEXPECTED, cause=describe_error(exc),
                step=None)
        self.provision_done(result)

    def provision_done(self, result):
        log.debug("provisioning finished: %s", result)
        self.session.finish(result)
        self.progress_view.spinner.stop()
        self.progress_view.show_result(result)
        self.app.request_screen_redraw()
        if self.answers.get("quit"):
            self.app.aio_loop.call_soon(self.cancel)

    def cancel(self):
        if self.session.phase is not Phase.DONE:
            log.debug("ignoring quit while provisioning")
            return
        super().cancel()
