"""Error taxonomy for the completion client.

Every failure of a remote exchange is terminal: nothing here is retried.
The session controller is the only place these are turned into
user-visible messages.
"""


class AssistantError(Exception):
    """Base class for completion client errors."""

    cause = "unknown"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(AssistantError):
    """The endpoint answered with a non-success HTTP status."""

    cause = "transport"

    def __init__(self, status_code: int, status_text: str = ""):
        super().__init__(f"API Error: {status_code} {status_text}".rstrip())
        self.status_code = status_code
        self.status_text = status_text


class NetworkError(AssistantError):
    """The request could not be completed (connection refused, DNS, reset)."""

    cause = "network"

    def __init__(self, message: str):
        super().__init__(f"Network error: {message}")


class RequestTimeoutError(NetworkError):
    """The endpoint did not answer before the request deadline."""

    cause = "timeout"

    def __init__(self, timeout: float):
        super().__init__(f"request timed out after {timeout:g}s")
        self.timeout = timeout


class MalformedResponseError(AssistantError):
    """The response body lacks the expected ``choices[0].message.content``.

    Only raised internally; the client degrades it to a fallback string.
    """

    cause = "malformed-response"
