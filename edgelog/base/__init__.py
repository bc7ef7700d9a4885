"""Endpoint blueprint, wire models and core utilities.

Every logging endpoint client inherits from the blueprint defined here.
Import it to type-hint your own code or to add further endpoint kinds.
"""

from .logging_endpoint import LoggingEndpointBlueprint
from .models import BigQueryEndpoint, StatusResponse
from .supported_endpoints import existing_endpoints


__all__ = [
    "LoggingEndpointBlueprint",
    "BigQueryEndpoint",
    "StatusResponse",
    "existing_endpoints",
]
