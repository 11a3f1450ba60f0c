from __future__ import annotations

import pytest
import structlog

from core.logging_config import get_logger, install_quiet_default


@pytest.fixture
def fresh_structlog():
    saved = structlog.get_config()
    structlog.reset_defaults()
    yield
    structlog.configure(**saved)


def test_library_default_drops_debug_and_keeps_warnings(fresh_structlog, capsys):
    install_quiet_default()
    log = get_logger("ruser.test")

    log.debug("http_request_start", url="https://randomuser.test/api")
    log.info("users_fetched", received=1)
    log.warning("something_odd")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "http_request_start" not in captured.err
    assert "users_fetched" not in captured.err
    assert "something_odd" in captured.err


def test_existing_configuration_is_kept(fresh_structlog):
    structlog.configure(processors=[structlog.processors.JSONRenderer()])

    install_quiet_default()

    assert isinstance(structlog.get_config()["processors"][0], structlog.processors.JSONRenderer)
