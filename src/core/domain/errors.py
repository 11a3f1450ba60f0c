"""Taxonomía de errores del cliente RandomUser.

Por qué una jerarquía propia:
- Los adaptadores traducen excepciones de librerías (httpx, pydantic) en el
  borde; el resto de capas solo conoce estos tipos.
- `message` es el texto legible que la vista muestra en su alerta.
"""

from __future__ import annotations


class RandomUserError(Exception):
    """Base de todos los errores del cliente."""

    default_message = "Unexpected error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidURL(RandomUserError):
    default_message = "Invalid URL."


class InvalidResponse(RandomUserError):
    """El transporte no entregó una respuesta HTTP utilizable."""

    default_message = "Invalid server response."


class HttpStatus(RandomUserError):
    """Status fuera de 200..299 (se conserva el código tal cual)."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Request failed with status code {status_code}.")


class DecodingError(RandomUserError):
    """El cuerpo no coincide con el esquema esperado."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Decoding error: {detail}")


class EmptyResults(RandomUserError):
    default_message = "No users found in response."


class Cancelled(RandomUserError):
    default_message = "Request was cancelled."


class InvalidArgument(RandomUserError, ValueError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid argument: {detail}")
