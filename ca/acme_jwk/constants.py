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

"""Collection of constants used by acme-jwk."""

import enum
from types import MappingProxyType

from cryptography import x509
from cryptography.hazmat.primitives.asymmetric import ec

# IMPORTANT: Do **not** import any module from acme_jwk at runtime here, or you risk circular imports.


class KeyType(str, enum.Enum):
    """Key types (the ``kty`` member) that can be loaded."""

    RSA = "RSA"
    EC = "EC"


class EllipticCurveId(str, enum.Enum):
    """Names of elliptic curves (the ``crv`` member) that can be loaded.

    The names are registered in RFC 7518, section 7.6.
    """

    P256 = "P-256"
    P384 = "P-384"
    P521 = "P-521"

    @property
    def oid(self) -> x509.ObjectIdentifier:
        """The object identifier of the named curve."""
        return ELLIPTIC_CURVE_OIDS[self]

    @property
    def curve_type(self) -> type[ec.EllipticCurve]:
        """The :py:class:`~cg:cryptography.hazmat.primitives.asymmetric.ec.EllipticCurve` class."""
        return ELLIPTIC_CURVE_TYPES[self]

    @property
    def coordinate_size(self) -> int:
        """Size of the ``x``, ``y`` and ``d`` members in bytes."""
        return ELLIPTIC_CURVE_COORDINATE_SIZES[self]

    @property
    def signature_algorithm(self) -> str:
        """The JWS algorithm (``alg`` header) used with this curve."""
        return ELLIPTIC_CURVE_SIGNATURE_ALGORITHMS[self]


#: Mapping of curve names to the implementing classes
ELLIPTIC_CURVE_TYPES: MappingProxyType[EllipticCurveId, type[ec.EllipticCurve]] = MappingProxyType(
    {
        EllipticCurveId.P256: ec.SECP256R1,
        EllipticCurveId.P384: ec.SECP384R1,
        EllipticCurveId.P521: ec.SECP521R1,
    }
)

ELLIPTIC_CURVE_IDS: MappingProxyType[type[ec.EllipticCurve], EllipticCurveId] = MappingProxyType(
    {v: k for k, v in ELLIPTIC_CURVE_TYPES.items()}
)

ELLIPTIC_CURVE_OIDS: MappingProxyType[EllipticCurveId, x509.ObjectIdentifier] = MappingProxyType(
    {
        EllipticCurveId.P256: ec.EllipticCurveOID.SECP256R1,  # 1.2.840.10045.3.1.7
        EllipticCurveId.P384: ec.EllipticCurveOID.SECP384R1,  # 1.3.132.0.34
        EllipticCurveId.P521: ec.EllipticCurveOID.SECP521R1,  # 1.3.132.0.35
    }
)

ELLIPTIC_CURVE_COORDINATE_SIZES: MappingProxyType[EllipticCurveId, int] = MappingProxyType(
    {
        EllipticCurveId.P256: 32,
        EllipticCurveId.P384: 48,
        EllipticCurveId.P521: 66,
    }
)

ELLIPTIC_CURVE_SIGNATURE_ALGORITHMS: MappingProxyType[EllipticCurveId, str] = MappingProxyType(
    {
        EllipticCurveId.P256: "ES256",
        EllipticCurveId.P384: "ES384",
        EllipticCurveId.P521: "ES512",
    }
)

#: RSA members that may only be present together (RFC 7518, section 6.3.2).
RSA_CRT_FIELDS = ("p", "q", "dp", "dq", "qi")

RSA_PUBLIC_FIELDS = ("n", "e")
EC_PUBLIC_FIELDS = ("x", "y")

#: Pattern for base64url encoded values without padding (RFC 4648, section 5).
BASE64URL_PATTERN = r"[A-Za-z0-9_-]*"
