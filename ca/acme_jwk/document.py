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

"""Parse JWK documents."""

import json
import typing
from collections.abc import Mapping

from pydantic import ValidationError

from acme_jwk.constants import KeyType
from acme_jwk.errors import MalformedInput, MissingKeyType, UnsupportedKeyType
from acme_jwk.models import JwkDocument


def parse_jwk(value: typing.Union[str, bytes]) -> JwkDocument:
    """Parse a JWK from its JSON representation.

    Raises
    ------
    MalformedInput
        If `value` is not a JSON object or a member has an invalid type.
    MissingKeyType
        If the object has no ``kty`` member.
    UnsupportedKeyType
        If ``kty`` is neither ``"RSA"`` nor ``"EC"``.
    """
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError as ex:
            raise MalformedInput("JWK is not valid UTF-8.") from ex

    try:
        data = json.loads(value)
    except ValueError as ex:
        raise MalformedInput(f"JWK is not valid JSON: {ex}") from ex
    except RecursionError as ex:
        raise MalformedInput("JWK is nested too deeply.") from ex

    if not isinstance(data, dict):
        raise MalformedInput()
    return parse_jwk_dict(data)


def parse_jwk_dict(data: Mapping[str, typing.Any]) -> JwkDocument:
    """Parse a JWK that was already loaded from JSON.

    This function raises the same exceptions as :py:func:`parse_jwk`.
    """
    if not isinstance(data, Mapping):
        raise MalformedInput()

    kty = data.get("kty")
    if kty is None:
        raise MissingKeyType()
    if not isinstance(kty, str):
        raise MalformedInput('"kty" member must be a string.', fields=("kty",))

    try:
        key_type = KeyType(kty)
    except ValueError as ex:
        raise UnsupportedKeyType(f"{kty}: Unsupported key type.", fields=("kty",)) from ex

    try:
        return JwkDocument.model_validate({**data, "kty": key_type})
    except ValidationError as ex:
        fields = tuple(str(error["loc"][0]) for error in ex.errors() if error["loc"])
        raise MalformedInput(f"JWK has invalid members: {', '.join(fields)}", fields=fields) from ex
