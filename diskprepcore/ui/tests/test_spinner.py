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
import unittest
from unittest import mock

from parameterized import parameterized

from diskprepcore.ui.spinner import Spinner, styles


class TestSpinner(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.app = mock.Mock()

    async def test_start_shows_first_glyph(self):
        spinner = Spinner("braille", app=self.app)
        spinner.start()
        self.addCleanup(spinner.stop)
        self.assertEqual("⠋", spinner.text)
        self.assertTrue(spinner.running)

    @parameterized.expand([("spin",), ("braille",)])
    async def test_ticks_wrap_around(self, style):
        texts = styles[style]["texts"]
        spinner = Spinner(style, app=self.app)
        spinner.start()
        self.addCleanup(spinner.stop)
        seen = []
        for _ in range(len(texts)):
            spinner.tick()
            seen.append(spinner.text)
        self.assertEqual(texts[1:] + texts[:1], seen)
        self.assertEqual(len(texts), self.app.request_screen_redraw.call_count)

    async def test_tick_rearms_timer(self):
        spinner = Spinner("spin", app=self.app)
        spinner.start()
        self.addCleanup(spinner.stop)
        first = spinner._handle
        spinner.tick()
        self.assertIsNotNone(spinner._handle)
        self.assertIsNot(first, spinner._handle)

    async def test_timer_drives_ticks(self):
        spinner = Spinner("spin", app=self.app)
        spinner.rate = 0.01
        spinner.start()
        self.addCleanup(spinner.stop)
        await asyncio.sleep(0.1)
        self.assertGreater(self.app.request_screen_redraw.call_count, 0)

    async def test_late_tick_after_stop_is_ignored(self):
        spinner = Spinner("braille", app=self.app)
        spinner.start()
        spinner.tick()
        spinner.stop()
        index = spinner.spin_index
        self.assertIsNone(spinner._handle)

        spinner.tick()

        self.assertEqual(index, spinner.spin_index)
        self.assertEqual("", spinner.text)
        self.assertIsNone(spinner._handle)
        self.assertEqual(1, self.app.request_screen_redraw.call_count)

    async def test_start_twice_is_noop(self):
        spinner = Spinner("spin", app=self.app)
        spinner.start()
        self.addCleanup(spinner.stop)
        handle = spinner._handle
        spinner.start()
        self.assertIs(handle, spinner._handle)
