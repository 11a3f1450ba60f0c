"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y la traducción de errores HTTP/decodificación.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con `MockTransport`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from core.config import AppSettings
from core.domain.errors import DecodingError, HttpStatus, InvalidResponse, InvalidURL
from core.interfaces.network import HTTPRequest
from core.logging_config import get_logger

T = TypeVar("T")

JSON_MEDIA_TYPE = "application/json"

logger = get_logger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - `transport` permite tests sin red (`httpx.MockTransport`).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": JSON_MEDIA_TYPE,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


@lru_cache(maxsize=32)
def _adapter_for(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def describe_validation_error(exc: ValidationError) -> str:
    """Resumen de una línea: `loc: msg; loc: msg`."""

    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or str(exc)


class NetworkClient:
    """Cliente de transporte: una request -> un objeto tipado.

    Reglas:
    - Sin `Accept` -> `application/json`; sin `User-Agent` -> el de settings.
    - Status fuera de 200..299 -> `HttpStatus(code)`, sin reintentos.
    - Cuerpo que no valida -> `DecodingError` con el detalle del validador.
    - Si se inyecta `client`, el llamador es dueño de su ciclo de vida; si no,
      se abre un cliente efímero por llamada.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    def _prepare_headers(self, request: HTTPRequest) -> httpx.Headers:
        headers = httpx.Headers(request.headers)
        if "Accept" not in headers:
            headers["Accept"] = JSON_MEDIA_TYPE
        if "User-Agent" not in headers:
            headers["User-Agent"] = self._settings.user_agent
        return headers

    async def _send(self, method: str, url: str, headers: httpx.Headers) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(method, url, headers=headers)
        async with build_async_client(self._settings) as client:
            return await client.request(method, url, headers=headers)

    async def request(self, request: HTTPRequest, response_type: type[T]) -> T:
        method = (request.method or "GET").upper()
        headers = self._prepare_headers(request)
        log = logger.bind(method=method, url=request.url)
        log.debug("http_request_start")

        try:
            response = await self._send(method, request.url, headers)
        except httpx.InvalidURL as exc:
            raise InvalidURL() from exc
        except httpx.RequestError as exc:
            log.debug("http_request_failed", error=type(exc).__name__)
            raise InvalidResponse() from exc

        status = response.status_code
        log.debug("http_response", status=status)
        if not isinstance(status, int) or not 100 <= status <= 599:
            raise InvalidResponse()
        if not 200 <= status <= 299:
            raise HttpStatus(status)

        try:
            return _adapter_for(response_type).validate_json(response.content)
        except ValidationError as exc:
            detail = describe_validation_error(exc)
            log.debug("http_decode_failed", detail=detail)
            raise DecodingError(detail) from exc
