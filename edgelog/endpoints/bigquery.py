"""BigQuery implementation of the logging endpoint blueprint."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from edgelog.base.logging_endpoint import LoggingEndpointBlueprint
from edgelog.base.config import ClientConfig, validate_config
from edgelog.base.http import HTTPClient
from edgelog.base.logger import el_logger
from edgelog.base.models import BigQueryEndpoint, StatusResponse
from edgelog.base.exceptions import (
    MissingServiceError,
    MissingVersionError,
    MissingNameError,
    MissingNewNameError,
    MissingProjectIDError,
    MissingDatasetError,
    MissingTableError,
    MissingUserError,
    MissingSecretKeyError,
    NotAcknowledgedError,
)


def _check_scope(service: str, version: int) -> None:
    """Raise if the service ID or version number is missing."""
    if not service:
        raise MissingServiceError()
    if not version or version <= 0:
        raise MissingVersionError()


def _collection_path(service: str, version: int, resource: str = "bigquery") -> str:
    return f"/service/{quote(service, safe='')}/version/{version}/logging/{resource}"


def _item_path(service: str, version: int, name: str) -> str:
    return f"{_collection_path(service, version)}/{quote(name, safe='')}"


class BigQuery(LoggingEndpointBlueprint):
    """BigQuery logging endpoints of a service version.

    Attributes:
        http: Shared HTTP request helper.
    """

    kind = "bigquery"

    # Creation posts to the ``gcs`` collection; list, get, update and delete
    # address ``bigquery``.
    CREATE_RESOURCE = "gcs"

    def __init__(self, config: ClientConfig | dict, *, http: HTTPClient | None = None) -> None:
        """Initialize the BigQuery endpoint client.

        Args:
            config: Client configuration (model or raw dict).
                   Expected attributes:
                   - api_key: Optional API token
                   - base_url: Optional API root URL
                   - timeout: Optional request timeout in seconds
            http: Optional pre-built HTTP helper to share between clients.
        """
        self.config = validate_config(config)
        self.http = http or HTTPClient(self.config)

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self.http.close()

    def __enter__(self) -> BigQuery:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _log(self, message: str, service: str, version: int, operation: str) -> None:
        el_logger.info(
            message,
            endpoint_kind=self.kind,
            service_id=service,
            version=version,
            operation=operation,
        )

    # --- Read ---

    def list(self, service: str, version: int) -> list[BigQueryEndpoint]:
        """List all BigQuery endpoints on a service version.

        Returns:
            One record per element of the response array, in server order.

        Raises:
            MissingServiceError: If *service* is empty.
            MissingVersionError: If *version* is not a positive integer.
        """
        _check_scope(service, version)
        self._log("Listing BigQuery endpoints", service, version, "list")
        resp = self.http.get(_collection_path(service, version))
        # A null body means no endpoints.
        return [BigQueryEndpoint.model_validate(item) for item in resp.json() or []]

    def get(self, service: str, version: int, name: str) -> BigQueryEndpoint:
        """Fetch one BigQuery endpoint by name."""
        _check_scope(service, version)
        if not name:
            raise MissingNameError()
        self._log(f"Fetching BigQuery endpoint '{name}'", service, version, "get")
        resp = self.http.get(_item_path(service, version, name))
        return BigQueryEndpoint.model_validate(resp.json())

    # --- Write ---

    def create(
        self,
        service: str,
        version: int,
        name: str,
        project_id: str = "",
        dataset: str = "",
        table: str = "",
        user: str = "",
        secret_key: str = "",
        *,
        format: str | None = None,
        response_condition: str | None = None,
    ) -> BigQueryEndpoint:
        """Create a BigQuery logging endpoint.

        Required fields are checked in signature order and the first
        missing one is reported.

        Args:
            service: Service ID.
            version: Service version number.
            name: Endpoint name.
            project_id: GCP project ID.
            dataset: BigQuery dataset.
            table: BigQuery table.
            user: User allowed to write to the dataset.
            secret_key: That user's secret key.
            format: Optional log line format string.
            response_condition: Optional name of the condition gating logging.

        Raises:
            MissingFieldError: The subclass matching the first empty field.
        """
        _check_scope(service, version)
        required = (
            (name, MissingNameError),
            (project_id, MissingProjectIDError),
            (dataset, MissingDatasetError),
            (table, MissingTableError),
            (user, MissingUserError),
            (secret_key, MissingSecretKeyError),
        )
        for value, error in required:
            if not value:
                raise error()

        params = {
            "name": name,
            "project_id": project_id,
            "dataset": dataset,
            "table": table,
            "user": user,
            "secret_key": secret_key,
        }
        if format is not None:
            params["format"] = format
        if response_condition is not None:
            params["response_condition"] = response_condition

        self._log(f"Creating BigQuery endpoint '{name}'", service, version, "create")
        resp = self.http.post_form(
            _collection_path(service, version, self.CREATE_RESOURCE), params
        )
        return BigQueryEndpoint.model_validate(resp.json())

    def update(self, service: str, version: int, name: str, new_name: str) -> BigQueryEndpoint:
        """Rename a BigQuery endpoint.

        Only ``name`` is sent; the record is addressed by its current name.

        Raises:
            MissingNameError: If *name* is empty.
            MissingNewNameError: If *new_name* is empty.
        """
        _check_scope(service, version)
        if not name:
            raise MissingNameError()
        if not new_name:
            raise MissingNewNameError()

        self._log(
            f"Renaming BigQuery endpoint '{name}' to '{new_name}'", service, version, "update"
        )
        resp = self.http.put_form(_item_path(service, version, name), {"name": new_name})
        return BigQueryEndpoint.model_validate(resp.json())

    def delete(self, service: str, version: int, name: str) -> None:
        """Delete a BigQuery endpoint.

        Raises:
            NotAcknowledgedError: If the server does not answer ``"status": "ok"``.
        """
        _check_scope(service, version)
        if not name:
            raise MissingNameError()

        self._log(f"Deleting BigQuery endpoint '{name}'", service, version, "delete")
        resp = self.http.delete(_item_path(service, version, name))
        status = StatusResponse.model_validate(resp.json())
        if not status.ok():
            raise NotAcknowledgedError("Not Ok")
