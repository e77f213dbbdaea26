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
import subprocess

import attr

from diskprep.common.filesystem import fstab_line, parse_permissions
from diskprep.common.types import (
    FailureKind,
    PipelineFailure,
    PipelineResult,
    PipelineSuccess,
)
from diskprepcore.context import Status
from diskprepcore.utils import describe_process_error

log = logging.getLogger("diskprep.provision.pipeline")


@attr.s(auto_attribs=True, frozen=True)
class Step:
    number: int
    name: str
    failure: FailureKind


STEPS = [
    Step(1, "parse-permissions", FailureKind.INVALID_PERMISSIONS),
    Step(2, "format", FailureKind.FORMAT_FAILED),
    Step(3, "mkdir", FailureKind.MKDIR_FAILED),
    Step(4, "mount", FailureKind.MOUNT_FAILED),
    Step(5, "uuid", FailureKind.UUID_LOOKUP_FAILED),
    Step(6, "fstab", FailureKind.FSTAB_WRITE_FAILED),
    Step(7, "verify", FailureKind.VERIFY_MOUNT_FAILED),
]


@attr.s(auto_attribs=True)
class Job:
    device: str
    mount_point: str
    permission_text: str
    mode: int = None
    uuid: str = None


def describe_error(exc):
    if isinstance(exc, subprocess.CalledProcessError):
        return describe_process_error(exc)
    return str(exc) or type(exc).__name__


class ProvisioningPipeline:
    """Format, mount and persist one device, stopping at the first error.

    execute() never raises for a failed step: the failure is returned as
    a PipelineFailure naming the step and the error text. Nothing is
    undone after a failure.
    """

    def __init__(self, operations, context):
        self.ops = operations
        self.context = context

    def _handlers(self):
        return {
            "parse-permissions": self._parse_permissions,
            "format": self._format,
            "mkdir": self._make_mount_point,
            "mount": self._mount,
            "uuid": self._resolve_uuid,
            "fstab": self._persist,
            "verify": self._verify,
        }

    async def _parse_permissions(self, job):
        job.mode = parse_permissions(job.permission_text)

    async def _format(self, job):
        await self.ops.format_device(job.device)

    async def _make_mount_point(self, job):
        await self.ops.make_mount_point(job.mount_point, job.mode)

    async def _mount(self, job):
        await self.ops.mount(job.device, job.mount_point)

    async def _resolve_uuid(self, job):
        uuid = (await self.ops.get_uuid(job.device) or "").strip()
        if not uuid:
            raise ValueError("no UUID reported for {}".format(job.device))
        job.uuid = uuid

    async def _persist(self, job):
        await self.ops.append_fstab(fstab_line(job.uuid, job.mount_point))

    async def _verify(self, job):
        await self.ops.mount_all()

    async def execute(self, device, mount_point, permission_text) -> PipelineResult:
        job = Job(device, mount_point, permission_text)
        handlers = self._handlers()
        for step in STEPS:
            context = self.context.child(
                step.name, "step {}".format(step.number))
            context.enter()
            try:
                await handlers[step.name](job)
            except Exception as exc:
                cause = describe_error(exc)
                log.warning(
                    "step %d (%s) failed: %s", step.number, step.name, cause)
                context.exit(cause, Status.FAIL)
                return PipelineFailure(
                    kind=step.failure, cause=cause, step=step.number)
            log.debug(
                "step %d (%s) done in %.2fs", step.number, step.name,
                context.elapsed())
            context.exit()
        log.info("provisioned %s at %s", device, mount_point)
        return PipelineSuccess()
