"""Exception types raised by brightpal."""

__all__ = ["BrightpalError", "InvalidArgument", "InvariantViolation"]


class BrightpalError(Exception):
    """Base class for every error raised by brightpal."""


class InvalidArgument(BrightpalError, ValueError):
    """A caller supplied a non-finite, non-numeric or out-of-domain argument."""


class InvariantViolation(BrightpalError, RuntimeError):
    """An internal guarantee was broken, e.g. a brightness bucket is missing.

    This signals a defect in index construction, not a user error.
    """
