"""Error codes returned by the sms-assistent.by plain-text endpoints."""

from __future__ import annotations

from typing import NoReturn

from .errors import ServiceError

ERROR_CODES: dict[int, str] = {
    -1: "Insufficient funds.",
    -2: "Invalid login or password.",
    -3: "Message text is missing.",
    -4: "Invalid recipient number.",
    -5: "Invalid sender name.",
    -6: "Login is missing.",
    -7: "Password is missing.",
    -10: "Service is temporarily unavailable.",
    -11: "Invalid message id.",
    -12: "Other error.",
    -13: "Account is blocked.",
    -14: "Request does not fit the allowed sending time window.",
    -15: "Invalid send date.",
}


def describe_error_code(code: int | float) -> str:
    return ERROR_CODES.get(int(code), f"Unknown error code {int(code)}.")


def raise_from_code(code: int | float) -> NoReturn:
    code = int(code)
    raise ServiceError(code, describe_error_code(code))
