# domain/geometry/alignment.py
"""Scale alignment between coefficient vectors that describe a plane."""
from typing import Sequence, Tuple

from domain.geometry.errors import DegenerateCoefficientsError


def position_of_max_absolute(values: Sequence[float]) -> Tuple[int, float]:
    """
    Find the coefficient with the greatest absolute value.

    The scan runs left to right and only replaces the current maximum when a
    strictly larger magnitude is found, so the first maximum wins ties.

    Args:
        values: Coefficients to scan

    Returns:
        Tuple of (index, value) of the largest-magnitude coefficient

    Raises:
        ValueError: If values is empty
    """
    if len(values) == 0:
        raise ValueError("Cannot find the largest coefficient of an empty vector")

    max_index, max_value = 0, values[0]
    for index, value in enumerate(values):
        if abs(value) > abs(max_value):
            max_index, max_value = index, value
    return max_index, max_value


def scale_ratio(reference: Sequence[float], other: Sequence[float]) -> float:
    """
    Estimate the scale factor relating two coefficient vectors of one plane.

    The ratio is taken at the position of the reference's largest coefficient:
    |other[index] / reference[index]|. Multiplying the reference by it brings
    both vectors to the same scale; the sign is left to the comparison.

    Raises:
        DegenerateCoefficientsError: If either vector has no nonzero coefficient
    """
    index, max_value = position_of_max_absolute(reference)
    if max_value == 0:
        raise DegenerateCoefficientsError("Reference plane has no nonzero coefficient to scale by")
    if not any(value != 0 for value in other):
        raise DegenerateCoefficientsError("Plane has no nonzero coefficient to scale to")
    return abs(other[index] / max_value)
