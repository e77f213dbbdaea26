# Copyright 2015 Canonical, Ltd.
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
import logging
import os

import urwid
import yaml

from diskprepcore.context import Context
from diskprepcore.controllerset import ControllerSet, import_controllers
from diskprepcore.palette import PALETTE_COLOR, PALETTE_MONO
from diskprepcore.ui.frame import DiskPrepCoreUI

log = logging.getLogger("diskprepcore.core")


def get_debug_flags(opts):
    # Recognized flags are "lsblk-fail", see diskprep/prober.py, and
    # "<step>-fail" for the provisioning steps, see
    # diskprep/provision/operations.py. Only honoured in dry-run mode.
    if not opts.dry_run:
        return ()
    return os.environ.get("DISKPREP_DEBUG", "").split(",")


class Application:

    # A concrete subclass must set project and controllers attributes, e.g.:
    #
    # project = "diskprep"
    # controllers = [
    #         "Device",
    #         "MountPoint",
    #         "Permissions",
    #         "Provision",
    # ]
    # The 'next_screen' method moves through the list of controllers in
    # order, calling the start_ui method on the controller instance.

    make_ui = DiskPrepCoreUI

    def __init__(self, opts):
        self.debug_flags = get_debug_flags(opts)

        self.ui = self.make_ui()
        self.opts = opts
        opts.project = self.project

        self.root = "/"
        if opts.dry_run:
            self.root = "." + self.project

        self.answers = {}
        if opts.answers is not None:
            self.answers = yaml.safe_load(opts.answers.read()) or {}
            log.debug("Loaded answers %s", self.answers)

        # Set rich_mode to the opposite of what we want, so we can
        # call toggle_rich to get the right things set up.
        self.rich_mode = opts.run_on_serial

        self.scale_factor = float(
            os.environ.get("DISKPREP_REPLAY_TIMESCALE", "1"))
        self.new_event_loop()
        self.urwid_loop = None
        self.redraw_pending = False
        self.base_model = self.make_model()
        self.controllers = ControllerSet(
            import_controllers(self.project),
            self.controllers,
            init_args=(self,))
        self.context = Context.new(self)

    def make_model(self):
        return None

    def new_event_loop(self):
        new_loop = asyncio.new_event_loop()
        asyncio.set_event_loop(new_loop)
        self.aio_loop = new_loop

    def select_screen(self, new):
        new.context.enter("starting UI")
        self.ui.set_progress(
            self.controllers.index + 1, len(self.controllers.instances))
        new.start_ui()

    def next_screen(self, *args):
        old = self.controllers.cur
        if old is not None:
            old.context.exit("completed")
            old.end_ui()
        self.controllers.index += 1
        if self.controllers.index >= len(self.controllers.instances):
            self.exit()
            return
        self.select_screen(self.controllers.cur)

    def report_start_event(self, name, description, level):
        logger = logging.getLogger(name)
        logger.log(getattr(logging, level), "start: %s", description)

    def report_finish_event(self, name, description, status, level):
        logger = logging.getLogger(name)
        logger.log(
            getattr(logging, level), "finish: %s %s", description, status.name)

# EventLoop -------------------------------------------------------------------

    def exit(self):
        self.aio_loop.stop()

    def _redraw_screen(self):
        self.redraw_pending = False
        if self.urwid_loop is not None:
            self.urwid_loop.draw_screen()

    def request_screen_redraw(self):
        # Widgets changed from timers and tasks rather than input handlers
        # are only redrawn when asked; coalesce requests into one draw.
        if not self.redraw_pending:
            self.redraw_pending = True
            self.aio_loop.call_soon(self._redraw_screen)

    def toggle_rich(self):
        if self.rich_mode:
            urwid.util.set_encoding("ascii")
            new_palette = PALETTE_MONO
            self.rich_mode = False
        else:
            urwid.util.set_encoding("utf-8")
            new_palette = PALETTE_COLOR
            self.rich_mode = True
        urwid.CanvasCache.clear()
        self.urwid_loop.screen.register_palette(new_palette)
        self.urwid_loop.screen.clear()

    def unhandled_input(self, key):
        if self.opts.dry_run and key == "ctrl x":
            self.exit()
        elif key == "f3":
            self.urwid_loop.screen.clear()
        elif self.opts.run_on_serial and key in ["ctrl t", "f4"]:
            self.toggle_rich()

    def start_controllers(self):
        log.debug("starting controllers")
        for controller in self.controllers.instances:
            controller.start()
        log.debug("controllers started")

    def make_screen(self, inputf=None, outputf=None):
        kw = {}
        if inputf is not None:
            kw["input"] = inputf
        if outputf is not None:
            kw["output"] = outputf
        return urwid.raw_display.Screen(**kw)

    def run(self, input=None, output=None):
        log.debug("Application.run")

        self.urwid_loop = urwid.MainLoop(
            self.ui,
            screen=self.make_screen(input, output),
            handle_mouse=False,
            unhandled_input=self.unhandled_input,
            event_loop=urwid.AsyncioEventLoop(loop=self.aio_loop),
        )

        self.toggle_rich()

        try:
            self.controllers.load_all()
            self.aio_loop.call_soon(self.next_screen)
            self.start_controllers()
            self.urwid_loop.run()
        except Exception:
            log.exception("Exception in controller.run():")
            raise
