from __future__ import annotations

import pytest

from sms_assistent.error_codes import ERROR_CODES, describe_error_code, raise_from_code
from sms_assistent.errors import ServiceError, SmsAssistentError


def test_all_known_codes_are_negative() -> None:
    assert ERROR_CODES
    assert all(code < 0 for code in ERROR_CODES)


def test_describe_known_code() -> None:
    assert describe_error_code(-1) == "Insufficient funds."


def test_describe_unknown_code() -> None:
    assert describe_error_code(-99) == "Unknown error code -99."


def test_raise_from_code_truncates_float() -> None:
    with pytest.raises(ServiceError) as exc:
        raise_from_code(-2.0)
    assert exc.value.code == -2
    assert isinstance(exc.value, SmsAssistentError)
    assert str(exc.value) == "Invalid login or password. (code -2)"


@pytest.mark.parametrize("code, description", sorted(ERROR_CODES.items()))
def test_raise_from_code_maps_every_known_code(code, description) -> None:
    with pytest.raises(ServiceError) as exc:
        raise_from_code(code)
    assert exc.value.code == code
    assert exc.value.description == description


def test_error_code_table_is_pinned() -> None:
    assert sorted(ERROR_CODES) == [-15, -14, -13, -12, -11, -10, -7, -6, -5, -4, -3, -2, -1]
    assert ERROR_CODES[-10] == "Service is temporarily unavailable."
    assert ERROR_CODES[-4] == "Invalid recipient number."
