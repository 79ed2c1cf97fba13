# domain/geometry/tolerance.py
from abc import abstractmethod
from enum import Enum
import math
from pydantic import Field, field_validator
from domain.geometry.constants import FIXED_EPSILON, DYNAMIC_EPSILON
from utils.base_model import ImmutableModel
from utils.constants import DYNAMIC_MODE


class Classification(Enum):
    """
    Result of comparing two values or two geometric objects.

    The value is the numeric code used when encoding a match into the
    output mapping (partner id times code). No ordering is implied.
    """
    SAME = 1
    DIFFERENT = 0
    OPPOSITE = -1


class ToleranceStrategy(ImmutableModel):
    """
    Base class for approximate comparison of two real numbers.

    A strategy decides whether a pair of values is the same, the same up to
    sign, or different. Same is always tested before Opposite, so a pair of
    zeros is classified as Same.
    """
    epsilon: float = Field(description="Tolerance threshold")

    @field_validator("epsilon")
    @classmethod
    def validate_epsilon(cls, value: float) -> float:
        """Validate that the tolerance is positive and finite."""
        if not (value > 0 and math.isfinite(value)):
            raise ValueError(f"Epsilon must be positive and finite, got {value}")
        return value

    @abstractmethod
    def compare(self, a: float, b: float) -> Classification:
        """Classify the pair (a, b)."""
        pass


class FixedEpsilon(ToleranceStrategy):
    """Absolute tolerance: |a - b| and |a + b| are measured against epsilon."""
    epsilon: float = Field(default=FIXED_EPSILON, description="Absolute tolerance")

    def compare(self, a: float, b: float) -> Classification:
        if abs(a - b) <= self.epsilon:
            return Classification.SAME
        if abs(a + b) <= self.epsilon:
            return Classification.OPPOSITE
        return Classification.DIFFERENT


class RelativeEpsilon(ToleranceStrategy):
    """
    Relative tolerance scaled by the magnitude of the operands.

    Multiplying both operands by the same nonzero factor never changes the
    classification, which does not hold for FixedEpsilon.
    """
    epsilon: float = Field(default=DYNAMIC_EPSILON, description="Relative tolerance")

    def compare(self, a: float, b: float) -> Classification:
        difference = abs(a - b)
        total = abs(a + b)
        if difference <= total * self.epsilon:
            return Classification.SAME
        if total <= difference * self.epsilon:
            return Classification.OPPOSITE
        return Classification.DIFFERENT


def strategy_for_mode(mode: str) -> ToleranceStrategy:
    """
    Select the tolerance strategy for a comparison mode.

    "Dynamic" selects RelativeEpsilon; any other value selects FixedEpsilon.
    """
    if mode == DYNAMIC_MODE:
        return RelativeEpsilon()
    return FixedEpsilon()
