"""
Error taxonomy for the FPL proxy.

Client errors (NotFound, InvalidInput) carry the HTTP status and the short
message returned to the caller as {"error": message}. UpstreamUnavailable is
never shown to the caller; handlers turn it into a generic 500.
"""
from typing import Optional


class FPLProxyError(Exception):
    """Base class for all proxy errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientError(FPLProxyError):
    """A request the caller can fix; mapped to a 4xx response."""
    status_code: int = 400


class NotFound(ClientError):
    """A requested player or team id does not exist upstream."""
    status_code = 404


class InvalidInput(ClientError):
    """A path parameter could not be parsed or is out of range."""
    status_code = 400


class UpstreamUnavailable(FPLProxyError):
    """
    The upstream FPL API could not be reached or answered with an error.

    Attributes:
        status_code: HTTP status returned upstream, None for transport errors
        cause: Underlying transport/parse exception, if any
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause
