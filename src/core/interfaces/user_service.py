"""Contrato del servicio de perfiles."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import User


@runtime_checkable
class RandomUserServiceProtocol(Protocol):
    async def fetch_users(self, count: int) -> list[User]:
        """Devuelve `count` perfiles en el orden de la respuesta."""

        ...

    async def fetch_user(self) -> User:
        """Devuelve un único perfil (el primero de `fetch_users(1)`)."""

        ...
