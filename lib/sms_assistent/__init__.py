__version__ = "0.1.0"

from .client import SmsAssistentClient
from .config_types import ClientConfig, DEFAULT_BASE_URL
from .errors import (
    AuthenticationError,
    ConstructionError,
    HttpStatusError,
    NetworkError,
    ResponseParseError,
    ServiceError,
    SmsAssistentError,
)
from .models import BatchDefaults, Message

__all__ = [
    "SmsAssistentClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "Message",
    "BatchDefaults",
    "SmsAssistentError",
    "AuthenticationError",
    "ConstructionError",
    "HttpStatusError",
    "NetworkError",
    "ResponseParseError",
    "ServiceError",
]
