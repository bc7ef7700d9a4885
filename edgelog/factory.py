"""Logging endpoint factory.

Provides :func:`endpoint_factory`, the single entry-point for creating
logging endpoint clients.  The function validates the client config and
dispatches on ``kind``, returning a typed instance via ``@overload``
signatures so IDEs can autocomplete methods.
"""

from typing import overload, Literal, Any

from edgelog.base import LoggingEndpointBlueprint, existing_endpoints
from edgelog.base.config import ClientConfig, validate_config
from edgelog.endpoints.bigquery import BigQuery
from edgelog.endpoints.factory import ENDPOINT_REGISTRY


@overload
def endpoint_factory(kind: Literal["bigquery"], config: dict | ClientConfig) -> BigQuery: ...


@overload
def endpoint_factory(kind: str, config: dict | ClientConfig) -> LoggingEndpointBlueprint: ...


def endpoint_factory(kind: existing_endpoints, config: dict | ClientConfig) -> Any:
    """
    Factory function to create logging endpoint clients by kind.
    Args:
        kind: The endpoint kind (e.g., 'bigquery').
        config: Configuration dictionary or model used to build the client.
    Returns:
        An instance of the requested endpoint client.
    Raises:
        ValueError: If the endpoint kind is not supported.
        pydantic.ValidationError: If the config is invalid.
    """
    if kind not in ENDPOINT_REGISTRY:
        raise ValueError(f"Unsupported logging endpoint: {kind}")

    endpoint_class = ENDPOINT_REGISTRY[kind]
    config_obj = validate_config(config)
    return endpoint_class(config_obj)
