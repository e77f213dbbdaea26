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
import shlex
import subprocess
from typing import Sequence

log = logging.getLogger("diskprepcore.utils")


def _clean_env(env, *, locale=True):
    if env is None:
        env = os.environ.copy()
    else:
        env = env.copy()
    if locale:
        env["LC_ALL"] = "C"
    return env


def _decode(data, encoding, errors):
    if encoding and isinstance(data, bytes):
        return data.decode(encoding, errors)
    return data


def run_command(
    cmd: Sequence[str],
    *,
    input=None,
    stdout=subprocess.PIPE,
    stderr=subprocess.PIPE,
    encoding="utf-8",
    errors="replace",
    env=None,
    clean_locale=True,
    **kw,
) -> subprocess.CompletedProcess:
    """A wrapper around subprocess.run with logging and different defaults.

    We never ever want a subprocess to inherit our file descriptors!
    """
    if input is None:
        kw["stdin"] = subprocess.DEVNULL
    else:
        input = input.encode(encoding)
    log.debug("run_command called: %s", cmd)
    try:
        cp = subprocess.run(
            cmd,
            input=input,
            stdout=stdout,
            stderr=stderr,
            env=_clean_env(env, locale=clean_locale),
            **kw,
        )
        cp.stdout = _decode(cp.stdout, encoding, errors)
        cp.stderr = _decode(cp.stderr, encoding, errors)
    except subprocess.CalledProcessError as e:
        log.debug("run_command %s", str(e))
        raise
    else:
        log.debug("run_command %s exited with code %s", cp.args, cp.returncode)
        return cp


async def arun_command(
    cmd: Sequence[str],
    *,
    stdout=subprocess.PIPE,
    stderr=subprocess.PIPE,
    encoding="utf-8",
    input=None,
    errors="replace",
    env=None,
    clean_locale=True,
    check=False,
    **kw,
) -> subprocess.CompletedProcess:
    if input is None:
        if "stdin" not in kw:
            kw["stdin"] = subprocess.DEVNULL
    else:
        kw["stdin"] = subprocess.PIPE
        input = input.encode(encoding)
    log.debug("arun_command called: %s", cmd)
    proc = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout,
        stderr=stderr,
        env=_clean_env(env, locale=clean_locale),
        **kw,
    )
    stdout, stderr = await proc.communicate(input=input)
    stdout = _decode(stdout, encoding, errors)
    stderr = _decode(stderr, encoding, errors)
    log.debug("arun_command %s exited with code %s", cmd, proc.returncode)
    # .communicate() forces returncode to be set to a value
    assert proc.returncode is not None
    if check and proc.returncode != 0:
        raise subprocess.CalledProcessError(proc.returncode, cmd, stdout, stderr)
    else:
        return subprocess.CompletedProcess(cmd, proc.returncode, stdout, stderr)


def describe_process_error(exc: subprocess.CalledProcessError) -> str:
    """Summarize a failed command as the operator should see it.

    The command's own stderr wins; a silent failure is described by the
    command line and its exit status."""
    stderr = exc.stderr
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", "replace")
    if stderr and stderr.strip():
        return stderr.strip()
    cmd = exc.cmd
    if not isinstance(cmd, str):
        cmd = shlex.join(cmd)
    return "{} exited with status {}".format(cmd, exc.returncode)
