"""Error taxonomy for the dashboard pipeline and the webhook relay."""


class DashboardLoadError(Exception):
    """Base class for failures on the dashboard read path."""


class ProfileFetchError(DashboardLoadError):
    """Raised when the profile query itself fails (not when it is empty)."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"Failed to fetch profile for user {user_id}")
        self.user_id = user_id


class AggregationError(DashboardLoadError):
    """Raised when any dashboard sub-query fails.

    ``cause`` is the first failure in dispatch order; the results of the
    other queries are discarded.
    """

    def __init__(self, source: str, cause: BaseException) -> None:
        super().__init__(f"Dashboard query '{source}' failed: {cause}")
        self.source = source
        self.cause = cause


class RelayError(Exception):
    """Base class for errors the webhook relay maps to HTTP responses."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict[str, object]:
        """Return the JSON body sent back to the caller."""
        return {"error": self.message}


class ValidationError(RelayError):
    """The inbound request is malformed. Caller-actionable."""

    status_code = 400


class ConfigurationError(RelayError):
    """The relay is missing required configuration. Operator-actionable."""

    status_code = 500


class MethodNotAllowed(RelayError):
    """The relay only forwards POST requests."""

    status_code = 405

    def __init__(self, method: str) -> None:
        super().__init__("Method not allowed")
        self.method = method


class UpstreamError(RelayError):
    """The automation webhook answered with a failure or was unreachable."""

    status_code = 500

    def __init__(self, upstream_status: int | None, body: str) -> None:
        if upstream_status is None:
            detail = f"n8n onboarding webhook request failed: {body}"
        else:
            detail = f"n8n onboarding webhook failed with status: {upstream_status}"
        super().__init__(detail)
        self.upstream_status = upstream_status
        self.body = body

    def to_body(self) -> dict[str, object]:
        return {"error": "Internal server error", "details": self.message}
