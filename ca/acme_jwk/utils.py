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

"""Utility functions."""

import re
import typing

import josepy as jose

from acme_jwk.constants import BASE64URL_PATTERN
from acme_jwk.errors import InvalidBase64Url

BASE64URL_RE = re.compile(BASE64URL_PATTERN)


def decode_b64url(value: str, field: typing.Optional[str] = None) -> bytes:
    """Decode a base64url encoded value as used in a JWK.

    JWK members are encoded without padding, so ``=`` is not accepted. The actual decoding is done by josepy.

    >>> decode_b64url("AQAB")
    b'\\x01\\x00\\x01'

    Parameters
    ----------
    value : str
        The encoded value.
    field : str, optional
        Name of the JWK member, used in error messages.

    Raises
    ------
    InvalidBase64Url
        If the value contains characters outside the base64url alphabet or has an impossible length.
    """
    fields = () if field is None else (field,)
    prefix = "" if field is None else f"{field}: "

    if BASE64URL_RE.fullmatch(value) is None:
        raise InvalidBase64Url(f"{prefix}Value contains characters not in the base64url alphabet.", fields)

    # A single character in the last group cannot encode a full byte.
    if len(value) % 4 == 1:
        raise InvalidBase64Url(f"{prefix}Value has an invalid length.", fields)

    try:
        return jose.json_util.decode_b64jose(value)
    except jose.errors.DeserializationError as ex:
        raise InvalidBase64Url(f"{prefix}{ex}", fields) from ex


def int_from_bytes(value: bytes) -> int:
    """Convert big-endian unsigned bytes to an integer.

    >>> int_from_bytes(b"\\x01\\x00\\x01")
    65537
    """
    return int.from_bytes(value, byteorder="big")
