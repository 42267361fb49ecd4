"""Pytest hooks and fixtures."""

from __future__ import annotations

import os
from typing import Any, Callable

import pytest

import blockwatch.chain.rpc as rpc_module


def pytest_collection_modifyitems(config, items):
    """Skip network tests unless BLOCKWATCH_LIVE=1."""
    if os.environ.get("BLOCKWATCH_LIVE") == "1":
        return
    skip = pytest.mark.skip(reason="Talks to a live node (set BLOCKWATCH_LIVE=1)")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip)


class FakeResponse:
    def __init__(self, body: Any = None, status_code: int = 200, raw: str | None = None):
        self.status_code = status_code
        self._body = body
        self._raw = raw
        self.text = raw or ""

    def json(self):
        if self._raw is not None:
            raise ValueError("not json")
        return self._body


class FakeNode:
    """Stands in for httpx.Client; answers by JSON-RPC method name."""

    def __init__(self) -> None:
        self.handlers: dict[str, Callable[[list[Any]], FakeResponse]] = {}
        self.requests: list[dict[str, Any]] = []
        self.headers: list[dict[str, str]] = []
        self.urls: list[str] = []
        self.timeouts: list[float | None] = []
        self.raise_on_post: Exception | None = None
        self.closed = False

    def result(self, method: str, result: Any) -> None:
        self.respond(method, {"jsonrpc": "2.0", "id": 1, "result": result})

    def error(self, method: str, error: Any) -> None:
        self.respond(method, {"jsonrpc": "2.0", "id": 1, "error": error})

    def respond(self, method: str, body: Any = None, *, status_code: int = 200, raw: str | None = None) -> None:
        response = FakeResponse(body, status_code=status_code, raw=raw)
        self.handlers[method] = lambda params: response

    def methods(self) -> list[str]:
        return [r["method"] for r in self.requests]

    # httpx.Client surface used by JsonRpcTransport

    def __call__(self, timeout: float | None = None) -> "FakeNode":
        self.timeouts.append(timeout)
        return self

    def post(self, url: str, json=None, headers=None) -> FakeResponse:
        self.urls.append(url)
        self.requests.append(json)
        self.headers.append(dict(headers or {}))
        if self.raise_on_post is not None:
            raise self.raise_on_post
        handler = self.handlers.get(json["method"])
        if handler is None:
            return FakeResponse({"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "method not found"}})
        return handler(json["params"])

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_node(monkeypatch) -> FakeNode:
    node = FakeNode()
    monkeypatch.setattr(rpc_module.httpx, "Client", node)
    return node
