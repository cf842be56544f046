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

"""Pydantic models for JWK documents and the key material assembled from them."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator

from acme_jwk.constants import RSA_CRT_FIELDS, EllipticCurveId, KeyType

NonEmptyBytes = Annotated[bytes, Field(min_length=1)]


class JwkDocument(BaseModel):
    """A JSON Web Key as defined in RFC 7517.

    Only members used for RSA and EC keys are typed, all other members (e.g. ``kid`` or ``use``) are kept as
    extra values. All typed members except ``kty`` are optional, and empty strings are treated like absent
    members.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    kty: KeyType

    # RSA
    n: Optional[StrictStr] = None
    e: Optional[StrictStr] = None
    p: Optional[StrictStr] = None
    q: Optional[StrictStr] = None
    dp: Optional[StrictStr] = None
    dq: Optional[StrictStr] = None
    qi: Optional[StrictStr] = None

    # EC
    crv: Optional[StrictStr] = None
    x: Optional[StrictStr] = None
    y: Optional[StrictStr] = None

    # Private exponent (RSA) or private scalar (EC)
    d: Optional[StrictStr] = None

    def get_member(self, name: str) -> Optional[str]:
        """Get the value of a member, or ``None`` if it is absent or empty."""
        value: Optional[str] = getattr(self, name)
        if not value:
            return None
        return value

    def has_member(self, name: str) -> bool:
        """Return ``True`` if the member is present and non-empty."""
        return self.get_member(name) is not None


class RsaPublicParams(BaseModel):
    """Public parameters of an RSA key."""

    model_config = ConfigDict(frozen=True)

    modulus: NonEmptyBytes
    exponent: NonEmptyBytes


class RsaPrivateParams(BaseModel):
    """Private parameters of an RSA key.

    The CRT parameters are either all set or all ``None``.
    """

    model_config = ConfigDict(frozen=True)

    d: NonEmptyBytes
    p: Optional[NonEmptyBytes] = None
    q: Optional[NonEmptyBytes] = None
    dp: Optional[NonEmptyBytes] = None
    dq: Optional[NonEmptyBytes] = None
    qi: Optional[NonEmptyBytes] = None

    @model_validator(mode="after")
    def check_crt_params(self) -> "RsaPrivateParams":
        """Validate that either all or none of the CRT parameters are set."""
        present = [getattr(self, name) is not None for name in RSA_CRT_FIELDS]
        if any(present) and not all(present):
            raise ValueError("Either all or none of the CRT parameters must be set.")
        return self

    @property
    def has_crt_params(self) -> bool:
        """``True`` if the CRT parameters are set."""
        return self.p is not None


class EcPublicParams(BaseModel):
    """Public parameters of an elliptic curve key."""

    model_config = ConfigDict(frozen=True)

    curve: EllipticCurveId
    x: NonEmptyBytes
    y: NonEmptyBytes


class EcPrivateParams(BaseModel):
    """Private parameters of an elliptic curve key."""

    model_config = ConfigDict(frozen=True)

    d: NonEmptyBytes


class RsaKeyMaterial(BaseModel):
    """Validated material for an RSA key."""

    model_config = ConfigDict(frozen=True)

    kty: Literal["RSA"] = "RSA"
    public: RsaPublicParams
    private: Optional[RsaPrivateParams] = None


class EcKeyMaterial(BaseModel):
    """Validated material for an elliptic curve key."""

    model_config = ConfigDict(frozen=True)

    kty: Literal["EC"] = "EC"
    public: EcPublicParams
    private: Optional[EcPrivateParams] = None


KeyMaterial = Annotated[Union[RsaKeyMaterial, EcKeyMaterial], Field(discriminator="kty")]
