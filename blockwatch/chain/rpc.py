"""JSON-RPC 2.0 transport over HTTP POST."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from blockwatch.chain.models import RpcEnvelope, RpcFailure, decode_envelope
from blockwatch.utils.exceptions import ParseError, RPCError

REQUEST_ID = 1


class JsonRpcTransport:
    """Send one JSON-RPC request per call to a fixed endpoint.

    No retries: a failed request surfaces immediately as ``RPCError``.
    """

    def __init__(self, endpoint: str, timeout: float | None = 30.0):
        self.endpoint = endpoint
        self.timeout = timeout
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "JsonRpcTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def build_payload(method: str, params: list[Any] | None = None) -> dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "method": method,
            "params": list(params or []),
            "id": REQUEST_ID,
        }

    def request(self, method: str, params: list[Any] | None = None) -> RpcEnvelope:
        """POST the request and decode the response into an envelope."""
        payload = self.build_payload(method, params)
        logger.debug(f"rpc -> {method} {self.endpoint}")
        try:
            resp = self._get_client().post(
                self.endpoint,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as exc:
            raise RPCError(f"request timed out: {method}", method=method) from exc
        except httpx.RequestError as exc:
            raise RPCError(f"network error calling {method}: {exc}", method=method) from exc
        except httpx.InvalidURL as exc:
            raise RPCError(f"invalid endpoint {self.endpoint!r}: {exc}", method=method) from exc

        status_code = int(getattr(resp, "status_code", 0) or 0)
        logger.debug(f"rpc <- {method} status={status_code}")
        try:
            body = resp.json()
        except ValueError as exc:
            if status_code >= 400:
                raise RPCError(
                    f"http error {status_code} calling {method}",
                    method=method,
                    status_code=status_code,
                ) from exc
            raise ParseError(f"non-json response body for {method}") from exc

        if status_code >= 400:
            detail = body.get("error") if isinstance(body, dict) else None
            raise RPCError(
                f"http error {status_code} calling {method}: {detail if detail is not None else body}",
                method=method,
                status_code=status_code,
                payload=detail,
            )
        return decode_envelope(body)

    def call(self, method: str, params: list[Any] | None = None) -> Any:
        """Return the raw ``result`` payload, raising ``RPCError`` on a node error."""
        envelope = self.request(method, params)
        if isinstance(envelope, RpcFailure):
            raise RPCError(f"JSON-RPC error: {envelope.message}", method=method, payload=envelope.error)
        return envelope.result
