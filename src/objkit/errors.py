"""Base error type shared by every objkit component."""


class ObjkitError(Exception):
    """Root of the objkit exception hierarchy."""
