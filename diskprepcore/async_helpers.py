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

import asyncio
import concurrent.futures
import logging

log = logging.getLogger("diskprepcore.async_helpers")


# Tasks we fire and forget. Holding a reference keeps them from being
# garbage collected before they are done.
background_tasks = set()


def _bg_task_done(task):
    background_tasks.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        log.error(
            "background task %s failed", task.get_name(),
            exc_info=(type(exc), exc, exc.__traceback__))


def run_bg_task(coro, *args, **kwargs) -> asyncio.Task:
    """Run a background task in a fire-and-forget style.

    Nobody awaits the task, so an exception escaping it is logged here
    rather than lost. The task is returned for callers (mostly tests)
    that want to wait for it anyway."""
    task = asyncio.create_task(coro, *args, **kwargs)
    background_tasks.add(task)
    task.add_done_callback(_bg_task_done)
    return task


async def run_in_thread(func, *args):
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, func, *args)
    except concurrent.futures.CancelledError:
        raise asyncio.CancelledError
