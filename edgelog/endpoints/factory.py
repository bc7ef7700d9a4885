"""Logging endpoint registry.

Maps endpoint kinds to their client implementations.
``ENDPOINT_REGISTRY`` is consumed by :func:`edgelog.factory.endpoint_factory`.
"""

from edgelog.endpoints.bigquery import BigQuery


ENDPOINT_REGISTRY: dict[str, type] = {
    "bigquery": BigQuery,
}
