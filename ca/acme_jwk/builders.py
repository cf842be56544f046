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

"""Assemble validated key material from JWK documents."""

from collections.abc import Sequence
from typing import Optional

from acme_jwk.conf import SettingsModel, get_settings
from acme_jwk.constants import EC_PUBLIC_FIELDS, RSA_CRT_FIELDS, RSA_PUBLIC_FIELDS, KeyType
from acme_jwk.curves import resolve_curve
from acme_jwk.errors import (
    IncompleteRsaPrivateParams,
    JWKError,
    MissingEcPublicParams,
    MissingRsaPublicParams,
    UnsupportedKeyType,
)
from acme_jwk.models import (
    EcKeyMaterial,
    EcPrivateParams,
    EcPublicParams,
    JwkDocument,
    KeyMaterial,
    RsaKeyMaterial,
    RsaPrivateParams,
    RsaPublicParams,
)
from acme_jwk.utils import decode_b64url


def _decode_members(
    document: JwkDocument, names: Sequence[str], error_class: type[JWKError]
) -> dict[str, bytes]:
    """Decode the given members, raising `error_class` if any of them is absent or empty."""
    values = [(name, document.get_member(name)) for name in names]
    missing = [name for name, value in values if value is None]
    if missing:
        raise error_class(fields=missing)
    return {name: decode_b64url(value, field=name) for name, value in values if value is not None}


def _decode_optional_member(document: JwkDocument, name: str) -> Optional[bytes]:
    value = document.get_member(name)
    if value is None:
        return None
    return decode_b64url(value, field=name)


def build_rsa_material(document: JwkDocument, settings: Optional[SettingsModel] = None) -> RsaKeyMaterial:
    """Assemble the material for an RSA key.

    If the private exponent ``d`` is present, the CRT parameters ``p``, ``q``, ``dp``, ``dq`` and ``qi`` must
    either all be present or all be absent (RFC 7518, section 6.3.2). If ``d`` is absent, any CRT parameters
    are ignored, unless ``reject_stray_crt_params`` is set.
    """
    settings = get_settings(settings)

    public_params = _decode_members(document, RSA_PUBLIC_FIELDS, MissingRsaPublicParams)
    public = RsaPublicParams(modulus=public_params["n"], exponent=public_params["e"])

    crt_present = [name for name in RSA_CRT_FIELDS if document.has_member(name)]
    d = _decode_optional_member(document, "d")
    if d is None:
        if crt_present and settings.reject_stray_crt_params:
            raise IncompleteRsaPrivateParams(
                'RSA key has CRT parameters but no private exponent "d".', fields=crt_present
            )
        return RsaKeyMaterial(public=public)

    if not crt_present:
        return RsaKeyMaterial(public=public, private=RsaPrivateParams(d=d))

    crt_params = _decode_members(document, RSA_CRT_FIELDS, IncompleteRsaPrivateParams)
    return RsaKeyMaterial(public=public, private=RsaPrivateParams(d=d, **crt_params))


def build_ec_material(document: JwkDocument) -> EcKeyMaterial:
    """Assemble the material for an elliptic curve key."""
    curve = resolve_curve(document)

    public_params = _decode_members(document, EC_PUBLIC_FIELDS, MissingEcPublicParams)
    public = EcPublicParams(curve=curve, x=public_params["x"], y=public_params["y"])

    d = _decode_optional_member(document, "d")
    if d is None:
        return EcKeyMaterial(public=public)
    return EcKeyMaterial(public=public, private=EcPrivateParams(d=d))


def build_key_material(document: JwkDocument, settings: Optional[SettingsModel] = None) -> KeyMaterial:
    """Assemble the material for any supported key type."""
    if document.kty == KeyType.RSA:
        return build_rsa_material(document, settings=settings)
    if document.kty == KeyType.EC:
        return build_ec_material(document)
    raise UnsupportedKeyType(f"{document.kty}: Unsupported key type.")  # pragma: no cover
