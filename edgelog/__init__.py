"""Edgelog — client for logging endpoint configuration on a CDN service.

Entry point for the library. Import :func:`endpoint_factory` to create
an endpoint client with a single call::

    from edgelog import endpoint_factory

    bq = endpoint_factory("bigquery", {"api_key": "..."})
    for endpoint in bq.list("svc123", 3):
        print(endpoint.name)
"""

from .base import (
    LoggingEndpointBlueprint,
    BigQueryEndpoint,
    StatusResponse,
)
from .base.config import ClientConfig
from .base.http import HTTPClient
from .base.exceptions import (
    EdgelogError,
    MissingFieldError,
    NotAcknowledgedError,
)
from .endpoints import BigQuery
from .factory import endpoint_factory

__all__ = [
    "LoggingEndpointBlueprint",
    "BigQueryEndpoint",
    "StatusResponse",
    "ClientConfig",
    "HTTPClient",
    "EdgelogError",
    "MissingFieldError",
    "NotAcknowledgedError",
    "BigQuery",
    "endpoint_factory",
]
