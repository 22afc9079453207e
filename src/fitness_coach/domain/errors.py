"""Errors surfaced by the coach pipeline."""


class CoachError(Exception):
    """Failure reported to the caller with an HTTP status and optional detail."""

    default_message = "Failed to generate response"
    default_status = 500

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        details: str | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.status_code = status_code or self.default_status
        self.details = details
        super().__init__(self.message)

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        payload["status"] = self.status_code
        return payload


class RateLimitError(CoachError):
    """Upstream rejected the call due to rate limiting or quota."""

    default_message = "Rate limit exceeded"
    default_status = 429


class UpstreamUnavailableError(CoachError):
    """Upstream returned a 5xx response."""

    default_message = "AI service unavailable"
    default_status = 503


class UpstreamRequestError(CoachError):
    """Upstream returned a non-2xx response that is not retry-worthy."""


class EmptyCompletionError(CoachError):
    """Upstream answered successfully but produced no candidate text."""

    default_message = "No response generated"


class CoachTimeoutError(CoachError):
    """The upstream call did not finish within the timeout."""

    default_message = "Request timeout"
    default_status = 408
