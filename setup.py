#!/usr/bin/env python3
# -*- mode: python; -*-
#
# Copyright 2020 Canonical, Ltd.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This package is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

"""
diskprep
========
Interactive formatter and mounter for block devices
"""

from setuptools import setup, find_packages

import os
import sys


with open(os.path.join(os.path.dirname(__file__),
                       'diskprepcore', '__init__.py')) as init:
    lines = [line for line in init if 'i18n' not in line]
    ns = {}
    exec('\n'.join(lines), ns)
    version = ns['__version__']

if sys.argv[-1] == 'clean':
    print("Cleaning up ...")
    os.system('rm -rf diskprep.egg-info build dist')
    sys.exit()

setup(name='diskprep',
      version=version,
      description="Format, mount and persist a block device",
      long_description=__doc__,
      license="AGPLv3+",
      packages=find_packages(include=["diskprep*", "diskprepcore*"]),
      python_requires='>=3.8',
      install_requires=[
          'urwid>=2.1',
          'attrs',
          'PyYAML',
      ],
      extras_require={
          'test': [
              'pytest',
              'parameterized>=0.9',
          ],
      },
      entry_points={
          'console_scripts': [
              'diskprep-tui = diskprep.cmd.tui:main',
          ],
      },
      data_files=[])
