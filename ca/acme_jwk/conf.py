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

"""Configuration for acme-jwk."""

from typing import Annotated, Optional

from annotated_types import Ge
from pydantic import BaseModel, ConfigDict


class SettingsModel(BaseModel):
    """Pydantic model defining available settings."""

    model_config = ConfigDict(frozen=True)

    #: Minimum size of RSA moduli in bits. Set to ``0`` to disable the check.
    min_rsa_key_size: Annotated[int, Ge(0)] = 1024

    #: Reject RSA keys with some CRT parameters but no private exponent. RFC 7518 does not say what to do
    #: with such keys, so they are loaded as public keys by default.
    reject_stray_crt_params: bool = False


model_settings = SettingsModel()


def get_settings(settings: Optional[SettingsModel] = None) -> SettingsModel:
    """Get the given settings or the module-level default."""
    if settings is None:
        return model_settings
    return settings
