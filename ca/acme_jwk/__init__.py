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

"""acme-jwk loads RSA and EC keys from JSON Web Keys for use in ACME clients."""

from importlib.metadata import PackageNotFoundError, version

from packaging.version import Version as PackagingVersion

from acme_jwk.loaders import load_jose_jwk, load_jwk, load_jwk_dict

try:
    __version__ = version("acme-jwk")

    __packaging_version__ = PackagingVersion(__version__)
    VERSION: tuple[int | str, ...] = __packaging_version__.release
    if __packaging_version__.dev:  # pragma: no cover
        VERSION = (*VERSION, "dev", __packaging_version__.dev)
    if __packaging_version__.pre:  # pragma: no cover
        VERSION = (*VERSION, "pre", *__packaging_version__.pre)
except PackageNotFoundError:  # pragma: no cover  # package is not installed
    pass

__all__ = ["load_jose_jwk", "load_jwk", "load_jwk_dict"]
