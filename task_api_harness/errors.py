"""Failures a test case can signal to the runner."""


class HarnessFailure(Exception):
    """Base for failures captured at the test case boundary."""


class AssertionFailure(HarnessFailure, AssertionError):
    """Raised when an expectation about a response did not hold."""


class TransportFailure(HarnessFailure, ConnectionError):
    """Raised when the HTTP probe could not complete a request."""


class DecodeFailure(HarnessFailure, ValueError):
    """Raised when a response body does not decode to the expected shape."""
