from __future__ import annotations

import pytest


class FakeTransport:
    def __init__(self, body: str = "0", post_result: bool = True) -> None:
        self.body = body
        self.post_result = post_result
        self.calls: list[tuple] = []

    def get(self, url, params, headers):
        self.calls.append(("GET", url, dict(params), dict(headers)))
        return self.body

    def post_xml(self, url, body, headers):
        self.calls.append(("POST", url, body, dict(headers)))
        return self.post_result


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
