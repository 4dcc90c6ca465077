# errors.py - exception types shared by the core


class InvalidArgument(ValueError):
    """Raised when a caller passes a missing or out-of-range argument."""
