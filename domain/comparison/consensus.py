# domain/comparison/consensus.py
"""
Classification of two geometric objects from their coefficient vectors.

Every informative coefficient position must agree on one classification;
a single dissenting position makes the pair Different.
"""
from typing import List, Optional, Sequence, Tuple

from domain.geometry.errors import DegenerateCoefficientsError
from domain.geometry.surface import Surface
from domain.geometry.tolerance import Classification, ToleranceStrategy

__all__ = [
    'DegenerateCoefficientsError',
    'informative_pairs',
    'classify_coefficients',
    'classify',
]


def informative_pairs(left: Sequence[float], right: Sequence[float]) -> List[Tuple[float, float]]:
    """
    Pair coefficients by position, dropping positions where both are exactly zero.

    Raises:
        ValueError: If the vectors have different lengths
        DegenerateCoefficientsError: If no position remains
    """
    if len(left) != len(right):
        raise ValueError(f"Coefficient vectors differ in length: {len(left)} != {len(right)}")

    pairs = [(a, b) for a, b in zip(left, right) if not (a == 0 and b == 0)]
    if not pairs:
        raise DegenerateCoefficientsError()
    return pairs


def _unanimous(pairs: Sequence[Tuple[float, float]], strategy: ToleranceStrategy,
               scale: float) -> Classification:
    candidate: Optional[Classification] = None
    for a, b in pairs:
        result = strategy.compare(scale * a, b)
        if candidate is None:
            candidate = result
        elif result != candidate:
            return Classification.DIFFERENT
    return candidate


def classify_coefficients(left: Sequence[float], right: Sequence[float],
                          strategy: ToleranceStrategy, scale: float = 1.0) -> Classification:
    """
    Classify two equal-length coefficient vectors by unanimous agreement.

    Positions where both raw values are exactly zero carry no information and
    are skipped. Each remaining left value is multiplied by scale before the
    comparison. The first remaining position sets the candidate
    classification; the pair keeps it only if every other position agrees.

    Args:
        left: Coefficients of the first object
        right: Coefficients of the second object
        strategy: Scalar comparison to apply at each position
        scale: Factor applied to the left values after filtering

    Returns:
        The agreed classification, or DIFFERENT on any disagreement

    Raises:
        ValueError: If the vectors have different lengths
        DegenerateCoefficientsError: If no informative position remains
    """
    return _unanimous(informative_pairs(left, right), strategy, scale)


def classify(first: Surface, second: Surface, strategy: ToleranceStrategy) -> Classification:
    """
    Decide whether two objects are the same, opposite or different.

    Objects of different kinds or coefficient counts are Different without
    looking at their coefficients. Planes are scale-aligned towards the
    second plane once the uninformative positions are dropped; other surfaces
    are compared as given.

    Raises:
        DegenerateCoefficientsError: If both objects have only zero
            coefficients, or either one is an all-zero plane
    """
    if not first.is_comparable_to(second):
        return Classification.DIFFERENT

    pairs = informative_pairs(first.coefficients, second.coefficients)
    return _unanimous(pairs, strategy, first.scale_factor(second))
