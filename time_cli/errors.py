# ABOUTME: Exception hierarchy for the time CLI.
# ABOUTME: Separates input validation failures from the stages of a history fetch.


class TimeCliError(Exception):
    """Base class for all errors raised by time_cli."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidLanguageCode(TimeCliError, ValueError):
    """Language code is not exactly two ASCII letters."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"'{value}' is not a valid ISO-639-1 language code (two ASCII letters)")


class InvalidDate(TimeCliError, ValueError):
    """Month/day pair does not exist in the reference leap year."""

    def __init__(self, month: int, day: int):
        self.month = month
        self.day = day
        super().__init__(f"'{month:02}-{day:02}' is not a valid calendar date")


class HistoryError(TimeCliError):
    """Any failure while fetching or decoding On This Day data."""


class HttpClientInitFailure(HistoryError):
    pass


class NetworkError(HistoryError):
    """DNS, connection or timeout failure while contacting Wikipedia."""

    def __init__(self, message: str, url: str):
        self.url = url
        super().__init__(message)


class UpstreamStatusError(HistoryError):
    """Wikipedia answered with a non-2xx status."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Wikipedia returned an error status ({status_code}) for {url}")


class DecodeError(HistoryError):
    """Response body was not the JSON shape we expect."""

    def __init__(self, message: str, url: str):
        self.url = url
        super().__init__(message)
