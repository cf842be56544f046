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

"""Load keys from JSON Web Keys (RFC 7517).

The functions in this module are the main entry points: They parse and validate the JWK, assemble the key
material and create a cryptography key from it. Any error raises a subclass of
:py:class:`~acme_jwk.errors.JWKError`.
"""

import logging
import typing
from collections.abc import Mapping
from typing import Optional

import josepy as jose

from cryptography.hazmat.primitives.asymmetric import ec, rsa

from acme_jwk.builders import build_key_material
from acme_jwk.conf import SettingsModel
from acme_jwk.document import parse_jwk, parse_jwk_dict
from acme_jwk.errors import JWKError
from acme_jwk.factory import build_key
from acme_jwk.models import EcKeyMaterial, JwkDocument
from acme_jwk.typehints import KeyHandle

log = logging.getLogger(__name__)


def _load_document(document: JwkDocument, settings: Optional[SettingsModel]) -> KeyHandle:
    try:
        material = build_key_material(document, settings=settings)
        key = build_key(material, settings=settings)
    except JWKError as ex:
        log.debug("%s: Could not load JWK: %s", ex.__class__.__name__, ex)
        raise

    visibility = "public" if material.private is None else "private"
    if isinstance(material, EcKeyMaterial):
        curve = material.public.curve
        log.debug("Loaded %s EC key on curve %s (%s).", visibility, curve.value, curve.signature_algorithm)
    else:
        log.debug("Loaded %s RSA key with %s bits.", visibility, key.key_size)
    return key


def load_jwk(value: typing.Union[str, bytes], settings: Optional[SettingsModel] = None) -> KeyHandle:
    """Load a key from its JWK representation.

    >>> load_jwk('{"kty": "EC", "crv": "P-256", "x": "...", "y": "..."}')  # doctest: +SKIP
    <cryptography.hazmat.bindings._rust.openssl.ec.ECPublicKey object at ...>

    Parameters
    ----------
    value : str or bytes
        The JSON-encoded JWK.
    settings : :py:class:`~acme_jwk.conf.SettingsModel`, optional
        Settings to use instead of the default settings.

    Returns
    -------
    RSA or elliptic curve key
        A public key if the JWK has no private members, otherwise a private key.
    """
    try:
        document = parse_jwk(value)
    except JWKError as ex:
        log.debug("%s: Could not parse JWK: %s", ex.__class__.__name__, ex)
        raise
    return _load_document(document, settings)


def load_jwk_dict(data: Mapping[str, typing.Any], settings: Optional[SettingsModel] = None) -> KeyHandle:
    """Load a key from a JWK that was already parsed, e.g. the ``jwk`` member of a JWS header."""
    try:
        document = parse_jwk_dict(data)
    except JWKError as ex:
        log.debug("%s: Could not parse JWK: %s", ex.__class__.__name__, ex)
        raise
    return _load_document(document, settings)


def load_jose_jwk(value: typing.Union[str, bytes], settings: Optional[SettingsModel] = None) -> jose.JWK:
    """Load a key from its JWK representation as a josepy JWK.

    The returned object can be used directly to sign ACME requests with josepy.
    """
    key = load_jwk(value, settings=settings)
    if isinstance(key, (rsa.RSAPublicKey, rsa.RSAPrivateKey)):
        return jose.JWKRSA(key=key)
    if isinstance(key, (ec.EllipticCurvePublicKey, ec.EllipticCurvePrivateKey)):
        return jose.JWKEC(key=key)
    raise TypeError(f"{key}: Unknown key type.")  # pragma: no cover
