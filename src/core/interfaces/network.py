"""Contrato del cliente de transporte.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El servicio depende de esta abstracción; los tests pasan stubs sin red.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@dataclass(frozen=True)
class HTTPRequest:
    """Descriptor de una request. La URL debe venir bien formada."""

    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class NetworkClientProtocol(Protocol):
    """Una request -> un objeto tipado, o una excepción `RandomUserError`.

    Reglas de diseño:
    - Sin estado entre llamadas: una instancia puede compartirse.
    - Sin reintentos.
    """

    async def request(self, request: HTTPRequest, response_type: type[T]) -> T:
        ...
