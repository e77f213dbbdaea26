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

import argparse
import fcntl
import logging
import os
import sys

from diskprep import __version__
from diskprep.core import DiskPrep
from diskprep.prober import EnumerationError, list_devices
from diskprepcore.core import get_debug_flags
from diskprepcore.log import setup_logger


def parse_options(argv):
    parser = argparse.ArgumentParser(
        description="diskprep - format, mount and persist a block device",
        prog="diskprep")
    parser.set_defaults(ascii=False)
    parser.add_argument("--dry-run", action="store_true",
                        dest="dry_run",
                        help="menu-only, do not run any host command")
    parser.add_argument("--serial", action="store_true",
                        dest="run_on_serial",
                        help="Run over a serial console.")
    parser.add_argument("--ascii", action="store_true",
                        dest="ascii",
                        help="Run in ascii mode.")
    parser.add_argument("--unicode", action="store_false",
                        dest="ascii",
                        help="Run in unicode mode.")
    parser.add_argument("--machine-config", metavar="CONFIG",
                        dest="machine_config", type=argparse.FileType(),
                        help="Don't run lsblk. Read devices from CONFIG")
    parser.add_argument("--answers")
    parser.add_argument("--fstab", metavar="PATH", default="/etc/fstab",
                        help="Mount table to append to (default %(default)s)")
    parser.add_argument("--no-sudo", action="store_false", dest="use_sudo",
                        help="Run privileged commands without sudo")
    return parser.parse_args(argv)


LOGDIR = "/var/log/diskprep/"


def default_logdir():
    if os.geteuid() == 0:
        return LOGDIR
    # Unprivileged operators cannot write to /var/log; the commands that
    # need root go through sudo anyway.
    cache = os.environ.get("XDG_CACHE_HOME", os.path.expanduser("~/.cache"))
    return os.path.join(cache, "diskprep")


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    opts = parse_options(argv)
    if opts.dry_run:
        logdir = ".diskprep"
    else:
        logdir = default_logdir()
    logfiles = setup_logger(dir=logdir, steps_logger="diskprep.provision")

    logger = logging.getLogger("diskprep")
    logger.info("Starting diskprep version {}".format(__version__))
    logger.info("Arguments passed: {}".format(argv))
    logger.debug("logging to %s", logfiles)

    try:
        devices = list_devices(opts.machine_config, get_debug_flags(opts))
    except EnumerationError as e:
        logger.error("listing devices failed: %s", e)
        print(_("Error fetching disks: {}").format(e), file=sys.stderr)
        return 1
    finally:
        if opts.machine_config is not None:
            opts.machine_config.close()

    if opts.answers:
        opts.answers = open(opts.answers)
        try:
            fcntl.flock(opts.answers, fcntl.LOCK_EX | fcntl.LOCK_NB)
        except OSError:
            logger.exception(
                "Failed to lock answers file, proceeding without it.")
            opts.answers.close()
            opts.answers = None

    diskprep_interface = DiskPrep(opts, devices)
    if opts.answers is not None:
        opts.answers.close()

    diskprep_interface.run()

    message = diskprep_interface.exit_message()
    if message is not None:
        print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
