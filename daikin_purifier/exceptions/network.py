"""
Network-related exceptions.
"""

from daikin_purifier.exceptions import DaikinException


class NetworkException(DaikinException):
    """Exception raised for network-related errors."""
    pass


class NetworkConnectionError(NetworkException):
    """Exception raised when a connection to the purifier cannot be established."""
    pass


class NetworkTimeoutError(NetworkException):
    """Exception raised when a request to the purifier times out."""
    pass


class ResponseError(NetworkException):
    """Exception raised when the purifier answers with an unusable HTTP response."""

    def __init__(self, status_code, message=None):
        """Initialize the exception with a status code and optional message.

        Args:
            status_code: HTTP status code
            message: Optional error message
        """
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP error {status_code}{': ' + message if message else ''}")
