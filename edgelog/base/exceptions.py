"""
Edgelog exception hierarchy.

Every error raised by the library inherits from :class:`EdgelogError`.
Required-field checks raise a :class:`MissingFieldError` subclass that
carries the offending field name, so callers can catch the base class and
inspect ``err.field`` or catch one specific kind.

Transport, HTTP-status and decode failures are not wrapped: they surface
as the ``httpx`` / ``json`` / ``pydantic`` exceptions that caused them.
"""


# ── Base ──────────────────────────────────────────────────────────────
class EdgelogError(Exception):
    """Root exception for all Edgelog errors."""


# ── Validation ────────────────────────────────────────────────────────
class MissingFieldError(EdgelogError, ValueError):
    """A required input field is empty, zero or absent."""

    field: str = ""

    def __init__(self, field: str | None = None) -> None:
        if field is not None:
            self.field = field
        super().__init__(f"Missing required field '{self.field}'")


class MissingServiceError(MissingFieldError):
    """Service ID is empty."""

    field = "service"


class MissingVersionError(MissingFieldError):
    """Version is zero, negative or absent."""

    field = "version"


class MissingNameError(MissingFieldError):
    """Endpoint name is empty."""

    field = "name"


class MissingNewNameError(MissingFieldError):
    """New endpoint name is empty."""

    field = "new_name"


class MissingProjectIDError(MissingFieldError):
    """BigQuery project ID is empty."""

    field = "project_id"


class MissingDatasetError(MissingFieldError):
    """BigQuery dataset is empty."""

    field = "dataset"


class MissingTableError(MissingFieldError):
    """BigQuery table is empty."""

    field = "table"


class MissingUserError(MissingFieldError):
    """Authorized user is empty."""

    field = "user"


class MissingSecretKeyError(MissingFieldError):
    """Secret key is empty."""

    field = "secret_key"


# ── Logging endpoints ─────────────────────────────────────────────────
class LoggingEndpointError(EdgelogError):
    """Base exception for logging endpoint operations."""


class NotAcknowledgedError(LoggingEndpointError):
    """The server answered a request without an affirmative status."""
