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

"""Types shared between the wizard screens and the provisioning pipeline."""

import enum
from typing import Optional, Union

import attr


@attr.s(auto_attribs=True, frozen=True)
class DeviceDescriptor:
    path: str


class FailureKind(enum.Enum):
    INVALID_PERMISSIONS = "invalid permissions"
    FORMAT_FAILED = "failed to format disk"
    MKDIR_FAILED = "failed to create mount point"
    MOUNT_FAILED = "failed to mount disk"
    UUID_LOOKUP_FAILED = "failed to get disk UUID"
    FSTAB_WRITE_FAILED = "failed to update fstab"
    VERIFY_MOUNT_FAILED = "failed to test mount"
    # Raised outside any step, so not tied to one.
    UNEXPECTED = "provisioning stopped unexpectedly"

    @property
    def summary(self):
        return self.value


@attr.s(auto_attribs=True, frozen=True)
class PipelineSuccess:
    ok = True


@attr.s(auto_attribs=True, frozen=True)
class PipelineFailure:
    kind: FailureKind
    cause: str
    step: Optional[int]

    ok = False

    @property
    def summary(self):
        return "{}: {}".format(self.kind.summary, self.cause)


PipelineResult = Union[PipelineSuccess, PipelineFailure]
