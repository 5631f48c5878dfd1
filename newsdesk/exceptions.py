class ParamParseError(Exception):
    """Raised when an inbound query parameter cannot be parsed."""


class UpstreamFailure(Exception):
    """Raised when the news API call fails."""


class UpstreamUnavailable(UpstreamFailure):
    """Raised when the news API cannot be reached."""


class UpstreamError(UpstreamFailure):
    """Raised when the news API answers with a non-success status."""

    def __init__(self, status_code: int, message: str = ""):
        super().__init__(message or f"News API HTTP error {status_code}")
        self.status_code = status_code


class DecodeError(UpstreamFailure):
    """Raised when the news API body is not a valid result set."""


class RenderError(Exception):
    """Raised when the results page template fails to render."""
