"""
ConfigurationError - Raised when the service is started with unusable settings.
Not recoverable at runtime; surfaces as HTTP 500 if hit during a request.
"""


class ConfigurationError(Exception):
    """Exception raised for invalid configuration values."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
