"""Shared fixtures: wire payloads, settings and an httpx client without network."""

from __future__ import annotations

import copy
from typing import Any, Callable

import httpx
import pytest

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import User

_BASE_USER: dict[str, Any] = {
    "gender": "female",
    "name": {"title": "Ms", "first": "Aino", "last": "Lampi"},
    "location": {
        "street": {"number": 4512, "name": "Hämeenkatu"},
        "city": "Pori",
        "state": "Satakunta",
        "country": "Finland",
        "postcode": 47350,
        "coordinates": {"latitude": "-46.6419", "longitude": "-47.1497"},
        "timezone": {"offset": "+2:00", "description": "Kaliningrad, South Africa"},
    },
    "email": "aino.lampi@example.com",
    "login": {
        "uuid": "2d1f0c3e-7a3b-4a43-9b1e-0c1f5b6d8e21",
        "username": "bluefrog512",
        "password": "kittycat",
        "salt": "Qm3JqPzC",
        "md5": "5d2e0a4b1b9f6c3d8e7a9f0b1c2d3e4f",
        "sha1": "b1946ac92492d2347c6235b4d2611184aaaaaaaa",
        "sha256": "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08",
    },
    "dob": {"date": "1990-03-14T08:21:45.123Z", "age": 35},
    "registered": {"date": "2012-07-02T11:04:12.456Z", "age": 13},
    "phone": "02-123-456",
    "cell": "041-555-12-34",
    "id": {"name": "HETU", "value": "NaNNA123undefined"},
    "picture": {
        "large": "https://randomuser.me/api/portraits/women/12.jpg",
        "medium": "https://randomuser.me/api/portraits/med/women/12.jpg",
        "thumbnail": "https://randomuser.me/api/portraits/thumb/women/12.jpg",
    },
    "nat": "FI",
}


def _make_user_payload(**overrides: Any) -> dict[str, Any]:
    payload = copy.deepcopy(_BASE_USER)
    if "uuid" in overrides:
        payload["login"]["uuid"] = overrides.pop("uuid")
    if "first" in overrides:
        payload["name"]["first"] = overrides.pop("first")
    if "postcode" in overrides:
        payload["location"]["postcode"] = overrides.pop("postcode")
    payload.update(overrides)
    return payload


@pytest.fixture
def user_payload() -> Callable[..., dict[str, Any]]:
    """Factory: `user_payload(uuid=..., first=..., postcode=..., **top_level)`."""

    return _make_user_payload


@pytest.fixture
def response_payload() -> Callable[..., dict[str, Any]]:
    def _make(*users: dict[str, Any]) -> dict[str, Any]:
        return {
            "results": list(users),
            "info": {"seed": "56d27f4a53bd5441", "results": len(users), "page": 1, "version": "1.4"},
        }

    return _make


@pytest.fixture
def make_user() -> Callable[..., User]:
    def _make(**overrides: Any) -> User:
        return User.model_validate(_make_user_payload(**overrides))

    return _make


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        base_url="https://randomuser.test",
        user_agent="ruser-test/0.1 (pytest)",
        http_timeout_seconds=5.0,
    )


@pytest.fixture
def mock_http(settings: AppSettings) -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Builds an `httpx.AsyncClient` whose transport is the given handler."""

    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return build_async_client(settings, transport=httpx.MockTransport(handler))

    return _build
