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

"""Various type aliases used throughout acme-jwk."""

from typing import Union

from cryptography.hazmat.primitives.asymmetric import ec, rsa

# IMPORTANT: Do **not** import any module from acme_jwk at runtime here, or you risk circular imports.

RSAKey = Union[rsa.RSAPublicKey, rsa.RSAPrivateKey]
ECKey = Union[ec.EllipticCurvePublicKey, ec.EllipticCurvePrivateKey]

#: Any key that can be loaded from a JWK.
KeyHandle = Union[RSAKey, ECKey]
