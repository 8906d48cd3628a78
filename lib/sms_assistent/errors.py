from __future__ import annotations


class SmsAssistentError(Exception):
    """Base client error."""


class ConstructionError(SmsAssistentError):
    """Client was built without a usable HTTP transport."""


class AuthenticationError(SmsAssistentError):
    """Credentials are missing or incomplete."""


class NetworkError(SmsAssistentError):
    """Transport/network layer error."""


class HttpStatusError(SmsAssistentError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class ServiceError(SmsAssistentError):
    def __init__(self, code: int, description: str):
        super().__init__(f"{description} (code {code})")
        self.code = code
        self.description = description


class ResponseParseError(SmsAssistentError):
    def __init__(self, message: str, body: str):
        super().__init__(message)
        self.body = body
