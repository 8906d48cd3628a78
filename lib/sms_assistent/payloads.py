from __future__ import annotations

import math
import re
from datetime import datetime

from .errors import ResponseParseError

SEND_TIME_FORMAT = "%Y%m%d%H%M"

_FLOAT_PREFIX_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX_RE = re.compile(r"^\s*[+-]?\d+")
_STRICT_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_STRICT_INT_RE = re.compile(r"[+-]?[0-9]+")


def format_send_time(time: datetime) -> str:
    # Wall-clock time is used verbatim, no timezone conversion.
    return time.strftime(SEND_TIME_FORMAT)


def build_message_params(
        phone: str,
        text: str,
        *,
        sender: str | None,
        time: datetime | None = None,
) -> dict[str, str]:
    params: dict[str, str] = {
        "recipient": phone,
        "message": text or "",
    }
    if sender:
        params["sender"] = sender
    if time is not None:
        params["date_send"] = format_send_time(time)
    return params


def parse_float(body: str, *, strict: bool = True) -> float:
    text = (body or "").strip()
    if strict:
        value = float(text) if _STRICT_FLOAT_RE.fullmatch(text) else math.nan
        if not math.isfinite(value):
            raise ResponseParseError(f"Expected a number in response, got {text[:100]!r}", body)
        return value
    m = _FLOAT_PREFIX_RE.match(text)
    return float(m.group(0)) if m else 0.0


def parse_int(body: str, *, strict: bool = True) -> int:
    text = (body or "").strip()
    if strict:
        if not _STRICT_INT_RE.fullmatch(text):
            raise ResponseParseError(f"Expected an integer in response, got {text[:100]!r}", body)
        return int(text)
    m = _INT_PREFIX_RE.match(text)
    return int(m.group(0)) if m else 0
