"""Concrete logging endpoint clients."""

from .bigquery import BigQuery

__all__ = ["BigQuery"]
