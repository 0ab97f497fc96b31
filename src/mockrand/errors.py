"""
mockrand Errors

TigerStyle: Explicit error types.
"""


class MockRandError(Exception):
    """Base error for mockrand operations."""

    pass


class InvalidArgumentError(MockRandError, ValueError):
    """An argument violated a precondition.

    Raised for unsupported seed types, empty sequences and invalid
    numeric options (non-positive precision, non-finite bounds).
    """

    pass
