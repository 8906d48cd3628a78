from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Any, Iterable, Mapping

from .config_types import ClientConfig, normalize_base_url
from .error_codes import raise_from_code
from .errors import AuthenticationError, ConstructionError, ResponseParseError
from .models import BatchDefaults, Message, coerce_defaults, coerce_message
from .payloads import build_message_params, parse_float, parse_int
from .transport import HttpTransport, Transport
from .xml_package import build_package

logger = logging.getLogger(__name__)

AUTH_TOKEN_HEADER = "requestAuthToken"


class SmsAssistentClient:
    """sms-assistent.by HTTP API client.

    Configuration is mutated through ``set_*`` methods which return the same
    client, so calls can be chained::

        client = SmsAssistentClient(transport).set_username("shop").set_token("...")
    """

    def __init__(self, transport: HttpTransport, cfg: ClientConfig | None = None):
        if transport is None:
            raise ConstructionError("HTTP client instance must be set.")
        if not (callable(getattr(transport, "get", None)) and callable(getattr(transport, "post_xml", None))):
            raise ConstructionError("HTTP client instance must provide get() and post_xml().")
        self._t = transport
        self._cfg = dataclasses.replace(cfg) if cfg is not None else ClientConfig()

    @classmethod
    def from_config(cls, cfg: ClientConfig) -> SmsAssistentClient:
        return cls(Transport(timeout_s=cfg.timeout_s), cfg)

    def close(self) -> None:
        close = getattr(self._t, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> SmsAssistentClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    # --- configuration ---
    def set_username(self, username: str) -> SmsAssistentClient:
        self._cfg.username = username
        return self

    def set_token(self, token: str | None) -> SmsAssistentClient:
        self._cfg.token = token
        return self

    def set_password(self, password: str | None) -> SmsAssistentClient:
        self._cfg.password = password
        return self

    def set_sender(self, sender: str | None) -> SmsAssistentClient:
        self._cfg.sender = sender
        return self

    def set_base_url(self, url: str) -> SmsAssistentClient:
        """Change base API URL, mostly useful for testing against a stub server."""
        self._cfg.base_url = normalize_base_url(url)
        return self

    # --- request helpers ---
    def endpoint_url(self, uri: str) -> str:
        return self._cfg.base_url + uri

    def check_authorization_data(self) -> None:
        if not self._cfg.username:
            raise AuthenticationError("Username cannot be empty.")
        if not self._cfg.token and not self._cfg.password:
            raise AuthenticationError("Either token or account password must be set.")

    def build_authorization_data(self, payload: dict[str, str], headers: dict[str, str]) -> None:
        """Add credentials to request data and/or headers in place. A token always wins over the password."""
        payload["user"] = self._cfg.username
        if self._cfg.token:
            headers[AUTH_TOKEN_HEADER] = self._cfg.token
        else:
            payload["password"] = self._cfg.password or ""

    # --- API methods ---
    def get_balance(self) -> float:
        """Return the amount of credits available on the account."""
        self.check_authorization_data()

        payload: dict[str, str] = {}
        headers: dict[str, str] = {}
        self.build_authorization_data(payload, headers)
        logger.debug("GET credits/plain")
        body = self._t.get(self.endpoint_url("credits/plain"), payload, headers)
        balance = parse_float(body, strict=self._cfg.strict_parsing)
        if balance < 0:
            if not balance.is_integer():
                raise ResponseParseError(
                    f"Expected an integer error code in response, got {body.strip()[:100]!r}",
                    body,
                )
            logger.warning("credits/plain returned error code %s", int(balance))
            raise_from_code(balance)
        return balance

    def send_message(
            self,
            phone: str,
            text: str,
            time: datetime | None = None,
            sender: str | None = None,
    ) -> int:
        """Send a single message.

        Returns the non-negative integer the service answers with (the message
        id), not a boolean. ``time`` delays delivery; ``sender`` overrides the
        configured default sender.
        """
        self.check_authorization_data()

        payload = {"user": self._cfg.username}
        payload.update(build_message_params(phone, text, sender=sender or self._cfg.sender, time=time))
        headers: dict[str, str] = {}
        self.build_authorization_data(payload, headers)
        logger.debug("GET send_sms/plain")
        body = self._t.get(self.endpoint_url("send_sms/plain"), payload, headers)
        code = parse_int(body, strict=self._cfg.strict_parsing)
        if code < 0:
            logger.warning("send_sms/plain returned error code %s", code)
            raise_from_code(code)
        return code

    def send_messages(
            self,
            messages: Iterable[Message | Mapping[str, Any]],
            defaults: BatchDefaults | Mapping[str, Any] | None = None,
            time: datetime | None = None,
    ) -> bool:
        """Send many messages in one XML package.

        Per-message ``text``/``sender`` override ``defaults``; only ``phone`` is
        required. The transport's success flag is returned as is, service
        error codes are not interpreted on this endpoint.
        """
        self.check_authorization_data()

        items = [coerce_message(m) for m in messages]
        body = build_package(
            login=self._cfg.username,
            messages=items,
            defaults=coerce_defaults(defaults),
            default_sender=self._cfg.sender,
            password=None if self._cfg.token else (self._cfg.password or ""),
            time=time,
            escape=self._cfg.escape_xml,
        )
        headers = {AUTH_TOKEN_HEADER: self._cfg.token} if self._cfg.token else {}
        logger.debug("POST xml with %d messages", len(items))
        return self._t.post_xml(self.endpoint_url("xml"), body, headers)
