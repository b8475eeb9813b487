"""Error types shared by the gateways and route handlers.

Each error carries the HTTP status it maps to, so handlers can re-raise
with a route-specific message and let the application exception handler
render ``{"success": false, "message": ...}``.
"""


class HealthConnectError(Exception):
    """Base error with an HTTP status and a user-facing message."""

    status_code: int = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message


class ValidationConflict(HealthConnectError):
    """Request conflicts with existing data (e.g. duplicate subscription)."""
    status_code = 400


class Unauthorized(HealthConnectError):
    status_code = 401


class NotFound(HealthConnectError):
    status_code = 404


class StorageUnavailable(HealthConnectError):
    """Document store call failed."""
    status_code = 500


class DeliveryFailed(HealthConnectError):
    """Outbound email could not be sent."""
    status_code = 500


class UpstreamUnavailable(HealthConnectError):
    """Completion API call failed."""
    status_code = 500
