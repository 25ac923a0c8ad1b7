"""Exception hierarchy for the SCP: Secret Laboratory API client.

An API-level failure (``{"Success": false, "Error": ...}``) is not an
exception: it is returned as :class:`scpsl.models.ErrorResponse`. Everything
below describes a request that could not be built, sent, or understood.
"""


class ScpslError(Exception):
    """Base exception for all client errors."""

    pass


class InvalidRequestError(ScpslError, ValueError):
    """Raised when request parameters are missing or invalid."""

    pass


class ScpslConnectionError(ScpslError):
    """Raised when the API cannot be reached."""

    pass


class ScpslTimeoutError(ScpslConnectionError):
    """Raised when a request times out."""

    pass


class ScpslHTTPStatusError(ScpslConnectionError):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(ScpslError):
    """Raised when a response body does not match the expected schema."""

    pass


class AddressParseError(ResponseDecodeError):
    """Raised when the ``ip`` endpoint returns something that is not an IP address."""

    pass
