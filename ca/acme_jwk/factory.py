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

"""Create cryptography keys from validated key material."""

from typing import Optional

from cryptography.hazmat.primitives.asymmetric import ec, rsa

from acme_jwk.conf import SettingsModel, get_settings
from acme_jwk.errors import NativeKeyRejected
from acme_jwk.models import (
    EcKeyMaterial,
    EcPrivateParams,
    EcPublicParams,
    KeyMaterial,
    RsaPrivateParams,
    RsaPublicParams,
)
from acme_jwk.typehints import ECKey, KeyHandle, RSAKey
from acme_jwk.utils import int_from_bytes


def _rsa_private_numbers(
    public_numbers: rsa.RSAPublicNumbers, private: RsaPrivateParams
) -> rsa.RSAPrivateNumbers:
    d = int_from_bytes(private.d)
    if private.has_crt_params:
        p = int_from_bytes(private.p)  # type: ignore[arg-type]  # has_crt_params guarantees all are set
        q = int_from_bytes(private.q)  # type: ignore[arg-type]
        dmp1 = int_from_bytes(private.dp)  # type: ignore[arg-type]
        dmq1 = int_from_bytes(private.dq)  # type: ignore[arg-type]
        iqmp = int_from_bytes(private.qi)  # type: ignore[arg-type]
    else:
        # cryptography always needs the CRT parameters, so they are derived from n, e and d.
        p, q = rsa.rsa_recover_prime_factors(public_numbers.n, public_numbers.e, d)
        dmp1 = rsa.rsa_crt_dmp1(d, p)
        dmq1 = rsa.rsa_crt_dmq1(d, q)
        iqmp = rsa.rsa_crt_iqmp(p, q)

    return rsa.RSAPrivateNumbers(
        p=p, q=q, d=d, dmp1=dmp1, dmq1=dmq1, iqmp=iqmp, public_numbers=public_numbers
    )


def build_rsa_key(
    public: RsaPublicParams,
    private: Optional[RsaPrivateParams] = None,
    settings: Optional[SettingsModel] = None,
) -> RSAKey:
    """Create an RSA key.

    Raises
    ------
    NativeKeyRejected
        If the modulus is smaller than ``min_rsa_key_size`` or cryptography considers the parameters invalid.
    """
    settings = get_settings(settings)
    public_numbers = rsa.RSAPublicNumbers(e=int_from_bytes(public.exponent), n=int_from_bytes(public.modulus))

    key_size = public_numbers.n.bit_length()
    if key_size < settings.min_rsa_key_size:
        raise NativeKeyRejected(
            f"{key_size}: RSA key size must be at least {settings.min_rsa_key_size} bits.", fields=("n",)
        )

    try:
        if private is None:
            return public_numbers.public_key()
        return _rsa_private_numbers(public_numbers, private).private_key()
    except ValueError as ex:
        raise NativeKeyRejected(f"Invalid RSA key: {ex}") from ex


def build_ec_key(public: EcPublicParams, private: Optional[EcPrivateParams] = None) -> ECKey:
    """Create an elliptic curve key.

    Raises
    ------
    NativeKeyRejected
        If the point is not on the curve or the private value does not match the public point.
    """
    public_numbers = ec.EllipticCurvePublicNumbers(
        x=int_from_bytes(public.x), y=int_from_bytes(public.y), curve=public.curve.curve_type()
    )

    try:
        if private is None:
            return public_numbers.public_key()
        private_numbers = ec.EllipticCurvePrivateNumbers(
            private_value=int_from_bytes(private.d), public_numbers=public_numbers
        )
        return private_numbers.private_key()
    except ValueError as ex:
        raise NativeKeyRejected(f"Invalid {public.curve.value} key: {ex}") from ex


def build_key(material: KeyMaterial, settings: Optional[SettingsModel] = None) -> KeyHandle:
    """Create a key from any supported key material."""
    if isinstance(material, EcKeyMaterial):
        return build_ec_key(material.public, material.private)
    return build_rsa_key(material.public, material.private, settings=settings)
