"""
Shared HTTP helper for the configuration API.

Wraps a single :class:`httpx.Client` bound to the API root.  Every method
returns the raw :class:`httpx.Response` after ``raise_for_status()``, so
transport errors and non-2xx statuses reach the caller as the ``httpx``
exceptions that describe them.
"""

from __future__ import annotations

from typing import Any

import httpx

from edgelog.base.config import ClientConfig
from edgelog.base.logger import el_logger

USER_AGENT = "edgelog-python"


class HTTPClient:
    """Thin request helper around :class:`httpx.Client`.

    Attributes:
        config: Validated client configuration.
        client: Underlying ``httpx`` client.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            config: Validated client configuration.
            transport: Optional ``httpx`` transport, e.g. ``httpx.MockTransport``.
        """
        self.config = config
        headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        if config.api_key:
            headers["Fastly-Key"] = config.api_key
        self.client = httpx.Client(
            base_url=config.base_url,
            headers=headers,
            timeout=config.timeout,
            transport=transport,
        )

    def request(
        self,
        method: str,
        path: str,
        *,
        data: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send one request and fail on a non-2xx status.

        Args:
            method: HTTP verb.
            path: Path relative to the API root.
            data: Optional form parameters, sent url-encoded.

        Raises:
            httpx.TransportError: On network failure.
            httpx.HTTPStatusError: On a non-2xx response.
        """
        response = self.client.request(method, path, data=data)
        el_logger.debug(
            f"{method} {path} -> {response.status_code}",
            operation="http_request",
        )
        response.raise_for_status()
        return response

    def get(self, path: str) -> httpx.Response:
        return self.request("GET", path)

    def post_form(self, path: str, params: dict[str, Any]) -> httpx.Response:
        return self.request("POST", path, data=params)

    def put_form(self, path: str, params: dict[str, Any]) -> httpx.Response:
        return self.request("PUT", path, data=params)

    def delete(self, path: str) -> httpx.Response:
        return self.request("DELETE", path)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
