# Copyright 2018 Canonical, Ltd.
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
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s"

# Log files hold device paths and command output; keep them private.
_DEF_PERMS = 0o640


def _point_link(target, link):
    # os.symlink refuses to replace an existing link, so make a fresh one
    # next to it and rename it over.
    tmp = target + ".link"
    os.symlink(os.path.basename(target), tmp)
    os.rename(tmp, link)


def _file_handler(dir, name, level):
    stable = os.path.join(dir, name)
    per_run = "{}.{}".format(stable, os.getpid())
    handler = logging.FileHandler(per_run)
    os.chmod(per_run, _DEF_PERMS)
    _point_link(per_run, stable)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler, per_run


def setup_logger(dir, base="diskprep", steps_logger=None):
    """Send log records to files under dir.

    Writes <base>-info.log and <base>-debug.log. Each name is a symlink
    to a file suffixed with the current pid, so earlier runs are kept.
    If steps_logger is given, its records (and its children's) also go
    to <base>-steps.log.

    Returns a dict mapping "info", "debug" and maybe "steps" to the
    per-run file names.
    """
    os.makedirs(dir, exist_ok=True)
    if os.getuid() == 0:
        os.chmod(dir, 0o750)

    root = logging.getLogger("")
    root.setLevel(logging.DEBUG)

    files = {}
    for level in "info", "debug":
        handler, files[level] = _file_handler(
            dir, "{}-{}.log".format(base, level),
            getattr(logging, level.upper()))
        root.addHandler(handler)

    if steps_logger is not None:
        handler, files["steps"] = _file_handler(
            dir, "{}-steps.log".format(base), logging.DEBUG)
        logging.getLogger(steps_logger).addHandler(handler)

    return files
