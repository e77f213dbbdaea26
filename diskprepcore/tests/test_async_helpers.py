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
import threading
import unittest

from diskprepcore.async_helpers import (
    background_tasks,
    run_bg_task,
    run_in_thread,
)


class TestRunBgTask(unittest.IsolatedAsyncioTestCase):
    async def test_keeps_reference_until_done(self):
        event = asyncio.Event()

        async def fn():
            await event.wait()
            return 42

        task = run_bg_task(fn())
        self.assertIn(task, background_tasks)
        event.set()
        self.assertEqual(42, await task)
        await asyncio.sleep(0)
        self.assertNotIn(task, background_tasks)

    async def test_logs_escaping_exception(self):
        async def fn():
            raise RuntimeError("pipeline crashed")

        with self.assertLogs("diskprepcore.async_helpers", "ERROR") as cm:
            task = run_bg_task(fn(), name="provision")
            with self.assertRaises(RuntimeError):
                await task
            await asyncio.sleep(0)
        self.assertIn("background task provision failed", cm.output[0])
        self.assertNotIn(task, background_tasks)

    async def test_cancelled_is_quiet(self):
        task = run_bg_task(asyncio.sleep(10))
        await asyncio.sleep(0)
        task.cancel()
        with self.assertRaises(asyncio.CancelledError):
            await task
        await asyncio.sleep(0)
        self.assertNotIn(task, background_tasks)


class TestRunInThread(unittest.IsolatedAsyncioTestCase):
    async def test_runs_off_the_loop_thread(self):
        loop_thread = threading.get_ident()
        worker_thread = await run_in_thread(threading.get_ident)
        self.assertNotEqual(loop_thread, worker_thread)

    async def test_propagates_exceptions(self):
        def fn(path):
            raise FileExistsError(path)

        with self.assertRaises(FileExistsError):
            await run_in_thread(fn, "/mnt/data")
