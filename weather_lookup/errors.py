# ABOUTME: Error taxonomy for the weather lookup pipeline.
# ABOUTME: Each error carries the HTTP status the request handler answers with.


class WeatherLookupError(Exception):
    """Base class for classified failures. status_code is the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WeatherLookupError):
    """The city parameter is missing or malformed."""

    status_code = 400


class NotFoundError(WeatherLookupError):
    """The provider has no location matching the query."""

    status_code = 404


class UpstreamError(WeatherLookupError):
    """The weather provider could not be reached or answered with a failure."""

    status_code = 502


class UnexpectedError(WeatherLookupError):
    status_code = 500
