"""Logging endpoint blueprint."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel


class LoggingEndpointBlueprint(ABC):
    """Abstract interface for one kind of logging endpoint.

    Every operation is scoped to a service ID and a service version.
    Implementations validate required fields before any network call.
    """

    #: Endpoint kind as used in the API path (e.g. ``"bigquery"``).
    kind: str = ""

    @abstractmethod
    def list(self, service: str, version: int) -> list[BaseModel]:
        """List all endpoints of this kind on a service version."""

    @abstractmethod
    def get(self, service: str, version: int, name: str) -> BaseModel:
        """Fetch one endpoint by name."""

    @abstractmethod
    def create(self, service: str, version: int, name: str, **kwargs: Any) -> BaseModel:
        """Create an endpoint.

        Args:
            service: Service ID.
            version: Service version number.
            name: Endpoint name, unique within the service version.
            **kwargs: Kind-specific destination settings.
        """

    @abstractmethod
    def update(self, service: str, version: int, name: str, new_name: str) -> BaseModel:
        """Rename an endpoint. *name* selects the record, *new_name* is sent."""

    @abstractmethod
    def delete(self, service: str, version: int, name: str) -> None:
        """Delete an endpoint from a service version."""
