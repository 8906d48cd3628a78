from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Message:
    phone: str
    text: str | None = None
    sender: str | None = None


@dataclass(frozen=True)
class BatchDefaults:
    text: str | None = None
    sender: str | None = None


def coerce_message(value: Message | Mapping[str, Any]) -> Message:
    """Accept either a Message or a mapping with ``phone``/``text``/``sender`` keys."""
    if isinstance(value, Message):
        return value
    if not isinstance(value, Mapping):
        raise TypeError(f"message must be a Message or a mapping, got {type(value).__name__}")
    phone = value.get("phone")
    if phone is None or str(phone) == "":
        raise ValueError("message phone is required")
    text = value.get("text")
    sender = value.get("sender")
    return Message(
        phone=str(phone),
        text=None if text is None else str(text),
        sender=None if sender is None else str(sender),
    )


def coerce_defaults(value: BatchDefaults | Mapping[str, Any] | None) -> BatchDefaults:
    if value is None:
        return BatchDefaults()
    if isinstance(value, BatchDefaults):
        return value
    if not isinstance(value, Mapping):
        raise TypeError(f"defaults must be BatchDefaults or a mapping, got {type(value).__name__}")
    text = value.get("text")
    sender = value.get("sender")
    return BatchDefaults(
        text=None if text is None else str(text),
        sender=None if sender is None else str(sender),
    )
