from __future__ import annotations

import logging

import pytest

from sms_assistent import ClientConfig, ResponseParseError, ServiceError, SmsAssistentClient


def _client(transport, **cfg) -> SmsAssistentClient:
    return SmsAssistentClient(transport, ClientConfig(username="shop", password="pw", **cfg))


def test_get_balance_returns_float(transport) -> None:
    transport.body = "3.50"
    assert _client(transport).get_balance() == 3.50

    method, url, params, headers = transport.calls[0]
    assert method == "GET"
    assert url == "https://userarea.sms-assistent.by/api/v1/credits/plain"
    assert params == {"user": "shop", "password": "pw"}
    assert headers == {}


def test_get_balance_zero_is_valid(transport) -> None:
    transport.body = "0"
    assert _client(transport).get_balance() == 0.0


def test_get_balance_negative_raises_service_error(transport) -> None:
    transport.body = "-10"
    with pytest.raises(ServiceError) as exc:
        _client(transport).get_balance()
    assert exc.value.code == -10
    assert exc.value.description == "Service is temporarily unavailable."


def test_get_balance_unparsable_body_raises(transport) -> None:
    transport.body = "<html>oops</html>"
    with pytest.raises(ResponseParseError) as exc:
        _client(transport).get_balance()
    assert exc.value.body == "<html>oops</html>"


def test_get_balance_lenient_parsing_defaults_to_zero(transport) -> None:
    transport.body = "<html>oops</html>"
    assert _client(transport, strict_parsing=False).get_balance() == 0.0


def test_get_balance_uses_custom_base_url(transport) -> None:
    transport.body = "1"
    _client(transport).set_base_url("http://stub.test/api").get_balance()
    assert transport.calls[0][1] == "http://stub.test/api/credits/plain"


@pytest.mark.parametrize("body", ["nan", "inf", "-inf", "1_000"])
def test_get_balance_rejects_non_decimal_bodies(transport, body) -> None:
    transport.body = body
    with pytest.raises(ResponseParseError):
        _client(transport).get_balance()


def test_get_balance_fractional_negative_is_not_an_error_code(transport) -> None:
    transport.body = "-0.5"
    with pytest.raises(ResponseParseError):
        _client(transport).get_balance()


def test_get_balance_lenient_overflow_is_rejected(transport) -> None:
    transport.body = "-1e999"
    with pytest.raises(ResponseParseError):
        _client(transport, strict_parsing=False).get_balance()


def test_get_balance_does_not_log_credentials(transport, caplog) -> None:
    transport.body = "-10"
    with caplog.at_level(logging.DEBUG, logger="sms_assistent"):
        with pytest.raises(ServiceError):
            _client(transport).get_balance()
    assert "credits/plain" in caplog.text
    assert "shop" not in caplog.text
    assert "pw" not in caplog.text
