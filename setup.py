#!/usr/bin/env python3
#
# This file is part of acme-jwk.
#
# acme-jwk is free software: you can redistribute it and/or modify it under the terms of the GNU General
# Public License as published by the Free Software Foundation, either version 3 of the License, or (at your
# option) any later version.
#
# acme-jwk is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the
# implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License along with acme-jwk. If not, see
# <http://www.gnu.org/licenses/>.

"""setuptools based setup.py file for acme-jwk."""

from setuptools import find_packages
from setuptools import setup

setup(
    packages=find_packages("ca", exclude=("acme_jwk.tests", "acme_jwk.tests.*")),
    package_dir={"": "ca"},
)
