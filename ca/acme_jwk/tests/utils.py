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

"""Helpers to create JWKs from cryptography keys in tests."""

import json
import typing

import josepy as jose

from cryptography.hazmat.primitives.asymmetric import ec, rsa

from acme_jwk.constants import ELLIPTIC_CURVE_IDS

JWK = dict[str, typing.Any]


def b64(value: int, size: typing.Optional[int] = None) -> str:
    """Encode an integer as unpadded base64url."""
    if size is None:
        size = max(1, (value.bit_length() + 7) // 8)
    return jose.json_util.encode_b64jose(value.to_bytes(size, byteorder="big"))


def rsa_jwk(key: typing.Union[rsa.RSAPrivateKey, rsa.RSAPublicKey]) -> JWK:
    """Get the JWK for the given RSA key, including all private members for private keys."""
    if isinstance(key, rsa.RSAPrivateKey):
        private_numbers = key.private_numbers()
        public_numbers = private_numbers.public_numbers
    else:
        private_numbers = None
        public_numbers = key.public_numbers()

    data = {"kty": "RSA", "n": b64(public_numbers.n), "e": b64(public_numbers.e)}
    if private_numbers is not None:
        data.update(
            {
                "d": b64(private_numbers.d),
                "p": b64(private_numbers.p),
                "q": b64(private_numbers.q),
                "dp": b64(private_numbers.dmp1),
                "dq": b64(private_numbers.dmq1),
                "qi": b64(private_numbers.iqmp),
            }
        )
    return data


def ec_jwk(key: typing.Union[ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey]) -> JWK:
    """Get the JWK for the given elliptic curve key."""
    curve_id = ELLIPTIC_CURVE_IDS[type(key.curve)]
    size = curve_id.coordinate_size

    if isinstance(key, ec.EllipticCurvePrivateKey):
        private_numbers: typing.Optional[ec.EllipticCurvePrivateNumbers] = key.private_numbers()
        public_numbers = key.public_key().public_numbers()
    else:
        private_numbers = None
        public_numbers = key.public_numbers()

    data = {
        "kty": "EC",
        "crv": curve_id.value,
        "x": b64(public_numbers.x, size),
        "y": b64(public_numbers.y, size),
    }
    if private_numbers is not None:
        data["d"] = b64(private_numbers.private_value, size)
    return data


def dumps(data: JWK) -> str:
    """Serialize a JWK to JSON."""
    return json.dumps(data)
