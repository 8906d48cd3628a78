"""Writer for the ``<package>`` document accepted by the batch ``xml`` endpoint.

The element and attribute order is fixed::

    <?xml version="1.0" encoding="utf-8" ?><package login=".." date_send=".." password="..">
    <message><default sender="..">..</default><msg recipient=".." sender="..">..</msg>...</message></package>

(without the line break). Values are escaped unless the writer is created with
``escape=False``, which reproduces the raw legacy output.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Mapping
from xml.sax.saxutils import escape as _xml_escape

from .models import BatchDefaults, Message
from .payloads import format_send_time

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8" ?>'

_ATTR_ENTITIES = {'"': "&quot;"}


class PackageWriter:
    def __init__(self, *, escape: bool = True):
        self._escape = escape
        self._parts: list[str] = [XML_DECLARATION]

    def _text(self, value: str) -> str:
        return _xml_escape(value) if self._escape else value

    def _attr(self, value: str) -> str:
        return _xml_escape(value, _ATTR_ENTITIES) if self._escape else value

    def _start_tag(self, tag: str, attrs: Mapping[str, str] | None) -> str:
        rendered = "".join(f' {name}="{self._attr(value)}"' for name, value in (attrs or {}).items())
        return f"<{tag}{rendered}>"

    def open(self, tag: str, attrs: Mapping[str, str] | None = None) -> None:
        self._parts.append(self._start_tag(tag, attrs))

    def close(self, tag: str) -> None:
        self._parts.append(f"</{tag}>")

    def element(self, tag: str, attrs: Mapping[str, str] | None = None, text: str = "") -> None:
        self._parts.append(f"{self._start_tag(tag, attrs)}{self._text(text)}</{tag}>")

    def getvalue(self) -> str:
        return "".join(self._parts)


def build_package(
        *,
        login: str,
        messages: Iterable[Message],
        defaults: BatchDefaults,
        default_sender: str | None = None,
        password: str | None = None,
        time: datetime | None = None,
        escape: bool = True,
) -> str:
    """Render the batch document.

    ``password`` is embedded only when given; callers authenticating by token
    pass ``None`` and send the token as a header instead.
    """
    w = PackageWriter(escape=escape)

    package_attrs = {"login": login}
    if time is not None:
        package_attrs["date_send"] = format_send_time(time)
    if password is not None:
        package_attrs["password"] = password
    w.open("package", package_attrs)
    w.open("message")

    default_sender_value = defaults.sender if defaults.sender is not None else (default_sender or "")
    w.element("default", {"sender": default_sender_value}, defaults.text or "")

    for msg in messages:
        attrs = {"recipient": msg.phone}
        # No fallback here: the service applies <default> itself.
        if msg.sender is not None:
            attrs["sender"] = msg.sender
        w.element("msg", attrs, msg.text or "")

    w.close("message")
    w.close("package")
    return w.getvalue()
