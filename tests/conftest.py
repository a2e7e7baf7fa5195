"""Shared fixtures for transport tests."""

import asyncio
from collections.abc import Callable
from typing import Any

import pytest


class FakeTransportHandle:
    """In-memory transport handle that completes once sent.

    Records how builders configure it and fires ``load`` or ``error`` on the
    next loop iteration after ``send``.
    """

    def __init__(
        self,
        *,
        response: Any = None,
        response_text: str = "",
        status: int = 200,
        fail: bool = False,
    ) -> None:
        self.response_type = ""
        self.status = 0
        self.method: str | None = None
        self.url: str | None = None
        self.headers: dict[str, str] = {}
        self.sent_body: Any = None
        self.send_calls = 0
        self.credential_sets = 0
        self._with_credentials = False
        self._response = response
        self._response_text = response_text
        self._final_status = status
        self._fail = fail
        self._listeners: dict[str, list[Callable[[], None]]] = {"load": [], "error": []}

    @property
    def with_credentials(self) -> bool:
        return self._with_credentials

    @with_credentials.setter
    def with_credentials(self, value: bool) -> None:
        self.credential_sets += 1
        self._with_credentials = value

    @property
    def response(self) -> Any:
        return self._response

    @property
    def response_text(self) -> str:
        return self._response_text

    def open(self, method: str, url: str) -> None:
        self.method = method
        self.url = url

    def set_request_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def add_event_listener(self, event: str, listener: Callable[[], None]) -> None:
        self._listeners[event].append(listener)

    def send(self, body: Any = None) -> None:
        self.send_calls += 1
        self.sent_body = body
        asyncio.get_running_loop().call_soon(self._complete)

    def fire(self, event: str) -> None:
        for listener in self._listeners[event]:
            listener()

    def _complete(self) -> None:
        self.status = self._final_status
        self.fire("error" if self._fail else "load")


@pytest.fixture
def fake_handle() -> type[FakeTransportHandle]:
    return FakeTransportHandle
