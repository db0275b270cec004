"""Exception types raised by DTLZ problems.

Both derive from ValueError so callers that already guard against bad
arguments with ``except ValueError`` keep working.
"""


class InvalidConfiguration(ValueError):
    """A problem was constructed with parameters outside their valid range."""


class SizeMismatch(ValueError):
    """A decision vector does not match the problem dimension."""
