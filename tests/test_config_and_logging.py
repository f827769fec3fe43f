import json
import logging

from address_gateway.core.config import Settings
from address_gateway.core.logging import (
    ContextFilter,
    StructuredLogFormatter,
    get_correlation_id,
    set_correlation_id,
)


def test_settings_defaults():
    settings = Settings(_env_file=None, JUSO_API_KEY=None)

    assert settings.JUSO_API_URL == "https://business.juso.go.kr/addrlink/addrLinkApi.do"
    assert settings.has_api_key is False


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("JUSO_API_KEY", "from-env")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", "http://a.test, http://b.test")

    settings = Settings(_env_file=None)

    assert settings.JUSO_API_KEY == "from-env"
    assert settings.PORT == 8080
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_set_correlation_id_generates_uuid():
    corr_id = set_correlation_id()
    assert corr_id
    assert get_correlation_id() == corr_id


def test_structured_formatter_includes_context_and_extra():
    set_correlation_id("corr-1")
    record = logging.LogRecord("address_gateway.test", logging.INFO, __file__, 10, "hello %s", ("주소",), None)
    record.status_code = 200
    ContextFilter().filter(record)

    data = json.loads(StructuredLogFormatter().format(record))

    assert data["message"] == "hello 주소"
    assert data["level"] == "INFO"
    assert data["correlation_id"] == "corr-1"
    assert data["status_code"] == 200
