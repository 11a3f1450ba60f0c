"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El mismo esquema decodifica el JSON de la API y lo vuelve a serializar
  (`model_dump(mode="json", by_alias=True)`) con la forma del wire.

Nota:
- Los nombres del wire ya son snake_case, igual que los campos Python; el
  único alias explícito es `id` -> `user_id`.
- Campos desconocidos se ignoran; campos requeridos ausentes fallan.
- Los enteros son estrictos: `"35"` no es una edad válida.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, StrictInt
from pydantic.config import ConfigDict


def _normalize_postcode(value: Any) -> str:
    """Acepta entero o string y normaliza a string.

    El orden es fijo: primero entero estricto (sin bool), luego string. La
    serialización siempre emite el string, así que el tipo original del wire
    se pierde.
    """

    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str):
        return value
    raise ValueError("postcode must be an integer or a string")


Postcode = Annotated[str, BeforeValidator(_normalize_postcode)]


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Name(_WireModel):
    title: str
    first: str
    last: str

    @property
    def full_name(self) -> str:
        return f"{self.first} {self.last}"


class Street(_WireModel):
    number: StrictInt
    name: str


class Coordinates(_WireModel):
    latitude: str = Field(..., description="Latitud decimal como string.")
    longitude: str = Field(..., description="Longitud decimal como string.")


class Timezone(_WireModel):
    offset: str
    description: str


class Location(_WireModel):
    street: Street
    city: str
    state: str
    country: str
    postcode: Postcode = Field(
        ...,
        description="Código postal normalizado (el wire puede enviar int o string).",
    )
    coordinates: Coordinates
    timezone: Timezone

    @property
    def full_address(self) -> str:
        return (
            f"{self.street.number} {self.street.name}, {self.city}, "
            f"{self.state} {self.postcode}, {self.country}"
        )

    @property
    def summary(self) -> str:
        return f"{self.city}, {self.state}, {self.country}"


class Login(_WireModel):
    uuid: str = Field(..., min_length=1, description="Identificador estable del perfil.")
    username: str
    password: str
    salt: str
    md5: str
    sha1: str
    sha256: str


class DateOfBirth(_WireModel):
    date: str
    age: StrictInt


class Registered(_WireModel):
    date: str
    age: StrictInt


class Picture(_WireModel):
    large: str
    medium: str
    thumbnail: str


class UserID(_WireModel):
    """Identificador externo opcional (p.ej. documento nacional).

    No confundir con `User.id`, que siempre es `login.uuid`.
    """

    name: str | None = None
    value: str | None = None


class User(_WireModel):
    """Perfil de usuario tal como lo entrega la API."""

    gender: str
    name: Name
    location: Location
    email: str
    login: Login
    dob: DateOfBirth
    registered: Registered
    phone: str
    cell: str
    picture: Picture
    nat: str = Field(..., description="Código de nacionalidad.")
    user_id: UserID | None = Field(
        default=None,
        alias="id",
        description="Identificador externo opcional (wire: `id`).",
    )

    @property
    def id(self) -> str:
        return self.login.uuid

    @property
    def age_text(self) -> str:
        return f"{self.dob.age} years old"


class ResponseInfo(_WireModel):
    seed: str
    results: StrictInt
    page: StrictInt
    version: str


class RandomUserResponse(_WireModel):
    """Envelope de `GET /api`.

    `results` conserva el orden de la respuesta. Una lista vacía es válida a
    nivel de esquema; el servicio la rechaza como `EmptyResults`.
    """

    results: list[User]
    info: ResponseInfo
