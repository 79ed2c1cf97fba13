# domain/geometry/errors.py
"""Errors raised while comparing geometric objects."""


class DegenerateCoefficientsError(ValueError):
    """Raised when a pair of coefficient vectors carries nothing to compare."""

    def __init__(self, message: str = "No informative coefficients to compare"):
        super().__init__(message)
