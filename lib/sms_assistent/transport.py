from __future__ import annotations

import logging
from typing import Mapping, Protocol, runtime_checkable

import httpx

from . import __version__
from .errors import HttpStatusError, NetworkError

logger = logging.getLogger(__name__)

XML_CONTENT_TYPE = "application/xml; charset=utf-8"


@runtime_checkable
class HttpTransport(Protocol):
    """What the client needs from an HTTP layer."""

    def get(self, url: str, params: Mapping[str, str], headers: Mapping[str, str]) -> str:
        ...

    def post_xml(self, url: str, body: str, headers: Mapping[str, str]) -> bool:
        ...


class Transport:
    def __init__(self, *, timeout_s: float = 15.0, transport: httpx.BaseTransport | None = None):
        self._client = httpx.Client(
            timeout=timeout_s,
            headers={"User-Agent": f"sms-assistent-client/{__version__}"},
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def get(self, url: str, params: Mapping[str, str], headers: Mapping[str, str]) -> str:
        try:
            r = self._client.get(url, params=dict(params), headers=dict(headers))
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        if r.status_code >= 400:
            text = r.text
            raise HttpStatusError(
                r.status_code,
                f"GET {url} failed with {r.status_code}",
                text[:1000] if text else None,
            )
        return r.text

    def post_xml(self, url: str, body: str, headers: Mapping[str, str]) -> bool:
        request_headers = {"Content-Type": XML_CONTENT_TYPE, **headers}
        try:
            r = self._client.post(url, content=body.encode("utf-8"), headers=request_headers)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        if not r.is_success:
            logger.debug("POST %s returned %s", url, r.status_code)
        return r.is_success
