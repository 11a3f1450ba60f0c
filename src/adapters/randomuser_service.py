"""Servicio RandomUser: `GET /api?results=N`.

Por qué en adapters:
- Conoce la forma del endpoint (path y query); el transporte queda detrás de
  `NetworkClientProtocol`.
- Un resultado vacío es un fallo de dominio aunque HTTP y decode hayan ido bien.
"""

from __future__ import annotations

import httpx

from adapters.http_client import NetworkClient
from core.config import AppSettings
from core.domain.errors import EmptyResults, InvalidArgument, InvalidURL
from core.domain.models import RandomUserResponse, User
from core.interfaces.network import HTTPRequest, NetworkClientProtocol
from core.logging_config import get_logger

API_PATH = "/api"

logger = get_logger(__name__)


class RandomUserService:
    """Implementa `RandomUserServiceProtocol` sobre un cliente compartido."""

    def __init__(
        self,
        client: NetworkClientProtocol | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or NetworkClient(self._settings)

    def build_users_url(self, count: int) -> str:
        try:
            base = httpx.URL(self._settings.base_url)
        except httpx.InvalidURL as exc:
            raise InvalidURL() from exc
        if base.scheme not in ("http", "https") or not base.host:
            raise InvalidURL()

        path = base.path.rstrip("/") + API_PATH
        return str(base.copy_with(path=path, params={"results": str(count)}))

    async def fetch_users(self, count: int) -> list[User]:
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidArgument(f"count must be a positive integer, got {count!r}")

        request = HTTPRequest(url=self.build_users_url(count))
        response = await self._client.request(request, RandomUserResponse)

        if not response.results:
            raise EmptyResults()

        logger.debug(
            "users_fetched",
            requested=count,
            received=len(response.results),
            seed=response.info.seed,
        )
        return list(response.results)

    async def fetch_user(self) -> User:
        users = await self.fetch_users(1)
        if not users:
            raise EmptyResults()
        return users[0]


def build_default_service(settings: AppSettings | None = None) -> RandomUserService:
    """Servicio con un `NetworkClient` propio construido desde settings."""

    settings = settings or AppSettings()
    return RandomUserService(NetworkClient(settings), settings)
