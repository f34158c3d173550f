"""Error types returned to gateway callers as JSON bodies."""
from __future__ import annotations
from typing import Any


class GatewayError(Exception):
    """Terminal failure of a generation request.

    ``retryable`` is advisory for the client; the gateway never retries.
    """
    status_code = 500
    error = "Internal server error"

    def __init__(self, details: str | None = None, retryable: bool | None = None) -> None:
        super().__init__(details or self.error)
        self.details = details
        self.retryable = retryable

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        if self.retryable is not None:
            body["retryable"] = self.retryable
        return body


class PromptValidationError(GatewayError):
    status_code = 400
    error = "Prompt is required"


class RequestBodyError(GatewayError):
    status_code = 400
    error = "Invalid request body"


class UpstreamError(GatewayError):
    """Non-2xx answer from the generation backend."""
    error = "Failed to generate image"

    def __init__(self, upstream_status: int, text: str) -> None:
        super().__init__(
            details=f"API returned {upstream_status}: {text}",
            retryable=upstream_status >= 500 or upstream_status == 429,
        )
        self.upstream_status = upstream_status
        self.status_code = 500 if upstream_status >= 500 else 400


class ExtractionError(GatewayError):
    """Backend succeeded but no image URL could be found."""
    error = "No image URL in response"

    def __init__(self, response_data: Any) -> None:
        super().__init__(
            details="The AI service returned a response but no image URL was found",
        )
        self.response_data = response_data

    def to_body(self) -> dict[str, Any]:
        body = super().to_body()
        body["responseData"] = self.response_data
        return body


class InternalError(GatewayError):
    def __init__(self, details: str | None = None) -> None:
        super().__init__(details=details or "Unknown error occurred", retryable=True)
