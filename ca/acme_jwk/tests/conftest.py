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

"""pytest configuration."""

# pylint: disable=redefined-outer-name  # requested pytest fixtures show up this way.

from cryptography.hazmat.primitives.asymmetric import ec, rsa

import pytest

from acme_jwk.constants import EllipticCurveId
from acme_jwk.tests.utils import JWK, ec_jwk, rsa_jwk


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    """Fixture for a 2048 bit RSA private key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def small_rsa_private_key() -> rsa.RSAPrivateKey:
    """Fixture for a 1024 bit RSA private key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=1024)


@pytest.fixture(scope="session", params=list(EllipticCurveId))
def ec_private_key(request: "pytest.FixtureRequest") -> ec.EllipticCurvePrivateKey:
    """Fixture for an elliptic curve private key for every supported curve."""
    curve_id: EllipticCurveId = request.param
    return ec.generate_private_key(curve_id.curve_type())


@pytest.fixture(scope="session")
def p256_private_key() -> ec.EllipticCurvePrivateKey:
    """Fixture for an elliptic curve private key on P-256."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def rsa_private_jwk(rsa_private_key: rsa.RSAPrivateKey) -> JWK:
    """Fixture for a private RSA JWK with all CRT parameters."""
    return rsa_jwk(rsa_private_key)


@pytest.fixture
def rsa_public_jwk(rsa_private_key: rsa.RSAPrivateKey) -> JWK:
    """Fixture for a public RSA JWK."""
    return rsa_jwk(rsa_private_key.public_key())


@pytest.fixture
def ec_private_jwk(ec_private_key: ec.EllipticCurvePrivateKey) -> JWK:
    """Fixture for a private elliptic curve JWK."""
    return ec_jwk(ec_private_key)


@pytest.fixture
def ec_public_jwk(ec_private_key: ec.EllipticCurvePrivateKey) -> JWK:
    """Fixture for a public elliptic curve JWK."""
    return ec_jwk(ec_private_key.public_key())


