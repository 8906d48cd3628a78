from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_BASE_URL = "https://userarea.sms-assistent.by/api/v1/"

ENV_BASE_URL = "SMS_ASSISTENT_BASE_URL"
ENV_USERNAME = "SMS_ASSISTENT_USERNAME"
ENV_TOKEN = "SMS_ASSISTENT_TOKEN"
ENV_PASSWORD = "SMS_ASSISTENT_PASSWORD"
ENV_SENDER = "SMS_ASSISTENT_SENDER"
ENV_TIMEOUT = "SMS_ASSISTENT_TIMEOUT"


@dataclass
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    username: str = ""
    token: str | None = None
    password: str | None = None
    sender: str | None = None
    timeout_s: float = 15.0
    # False reproduces the unescaped legacy XML byte for byte.
    escape_xml: bool = True
    # False falls back to reading a leading numeric prefix, else 0.
    strict_parsing: bool = True

    def __post_init__(self) -> None:
        self.base_url = normalize_base_url(self.base_url)


def normalize_base_url(url: str | None) -> str:
    value = url or ""
    if not value.endswith("/"):
        value += "/"
    return value


def _env_value(environ: Mapping[str, str], key: str) -> str | None:
    value = (environ.get(key) or "").strip()
    return value or None


def config_from_env(environ: Mapping[str, str] | None = None) -> ClientConfig:
    env = os.environ if environ is None else environ
    cfg = ClientConfig(
        base_url=_env_value(env, ENV_BASE_URL) or DEFAULT_BASE_URL,
        username=_env_value(env, ENV_USERNAME) or "",
        token=_env_value(env, ENV_TOKEN),
        password=_env_value(env, ENV_PASSWORD),
        sender=_env_value(env, ENV_SENDER),
    )
    timeout_raw = _env_value(env, ENV_TIMEOUT)
    if timeout_raw is not None:
        try:
            cfg.timeout_s = float(timeout_raw)
        except ValueError as e:
            raise ValueError(f"{ENV_TIMEOUT} must be a number, got {timeout_raw!r}") from e
    return cfg
