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

"""Collection of exception classes raised when loading a JWK.

All errors are permanent: Retrying with the same input will always give the same result.
"""

import typing


class JWKError(ValueError):
    """Base class for all exceptions raised when loading a JWK."""

    message = "Invalid JWK."

    def __init__(self, message: typing.Optional[str] = None, fields: typing.Iterable[str] = ()) -> None:
        if message is None:
            message = self.message
        super().__init__(message)
        self.fields = tuple(fields)


class MalformedInput(JWKError):
    """Exception when the input is not a JSON object or a member has an invalid type."""

    message = "JWK is not a JSON object."


class MissingKeyType(JWKError):
    """Exception when the JWK has no "kty" member."""

    message = 'JWK has no "kty" member.'

    def __init__(self, message: typing.Optional[str] = None) -> None:
        super().__init__(message, fields=("kty",))


class UnsupportedKeyType(JWKError):
    """Exception when the key type is neither RSA nor EC."""

    message = "Unsupported key type."


class MissingRsaPublicParams(JWKError):
    """Exception when the modulus or exponent of an RSA key is missing."""

    message = 'RSA key requires "n" and "e" members.'


class IncompleteRsaPrivateParams(JWKError):
    """Exception when only some of the RSA CRT parameters are present."""

    message = 'RSA key must have either all or none of "p", "q", "dp", "dq" and "qi".'


class MissingCurve(JWKError):
    """Exception when an EC key has no "crv" member."""

    message = 'EC key has no "crv" member.'

    def __init__(self, message: typing.Optional[str] = None) -> None:
        super().__init__(message, fields=("crv",))


class UnsupportedCurve(JWKError):
    """Exception when the curve of an EC key is not supported."""

    message = "Unsupported elliptic curve."

    def __init__(self, message: typing.Optional[str] = None) -> None:
        super().__init__(message, fields=("crv",))


class MissingEcPublicParams(JWKError):
    """Exception when the coordinates of an EC key are missing."""

    message = 'EC key requires "x" and "y" members.'


class InvalidBase64Url(JWKError):
    """Exception when a member is not valid base64url."""

    message = "Value is not valid base64url."


class NativeKeyRejected(JWKError):
    """Exception when cryptography refuses to create a key from the given parameters."""

    message = "Key parameters were rejected."
