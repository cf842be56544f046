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

"""Resolve the curve of elliptic curve keys."""

from acme_jwk.constants import EllipticCurveId
from acme_jwk.errors import MissingCurve, UnsupportedCurve
from acme_jwk.models import JwkDocument


def resolve_curve(document: JwkDocument) -> EllipticCurveId:
    """Get the curve named by the ``crv`` member of `document`.

    Only the NIST curves P-256, P-384 and P-521 are supported.
    """
    if document.crv is None:
        raise MissingCurve()

    try:
        return EllipticCurveId(document.crv)
    except ValueError as ex:
        raise UnsupportedCurve(f"{document.crv}: Unsupported elliptic curve.") from ex
