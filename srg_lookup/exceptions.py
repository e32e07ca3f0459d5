"""
Error types raised by the token lookup workflow.

Every failure of a lookup is terminal and is shown to the user as a single
message, so each exception carries its display text as ``message``.
"""


class TokenLookupError(Exception):
    """Base class for all lookup failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TokenLookupError):
    """Address or network missing; raised before any request is made."""

    def __init__(self, message: str = "Please provide a valid token ID and select a network."):
        super().__init__(message)


class UnsupportedNetworkError(TokenLookupError):
    """Network selector has no explorer endpoint."""

    def __init__(self, message: str = "ABI check for this network is not supported."):
        super().__init__(message)


class FetchError(TokenLookupError):
    """Transport, timeout or JSON decoding failure talking to an API."""


class NotSRG20Error(TokenLookupError):
    """Contract ABI does not carry the SRG20 marker."""

    def __init__(self, message: str = "THIS IS NOT A SRG20 TOKEN"):
        super().__init__(message)


class UpstreamError(TokenLookupError):
    """Market-data API answered with a non-success status."""
