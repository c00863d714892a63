"""AnalysisFailure — the closed set of ways an image analysis can fail.

Every failure is raised to the immediate caller and never retried. ``str()``
of a failure is the message a presentation layer should render as-is.
"""
from image_describer.constants import MSG_MALFORMED_RESPONSE, MSG_MISSING_IMAGE


class AnalysisFailure(Exception):
    """Base class for all image analysis failures."""


class MissingImage(AnalysisFailure):
    """No image bytes were given; raised before any network call."""

    def __init__(self) -> None:
        super().__init__(MSG_MISSING_IMAGE)


class TransportFailure(AnalysisFailure):
    """Connection, DNS, TLS or timeout error talking to the provider."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class RemoteError(AnalysisFailure):
    """The provider answered with a structured ``error`` payload."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedResponse(AnalysisFailure):
    """The response body matched neither known completion shape."""

    def __init__(self) -> None:
        super().__init__(MSG_MALFORMED_RESPONSE)
