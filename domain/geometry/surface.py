# domain/geometry/surface.py
from typing import List
from pydantic import Field, field_validator, model_validator
import math
from domain.geometry.alignment import scale_ratio
from domain.geometry.constants import PLANE_KIND
from utils.base_model import ImmutableModel


class Surface(ImmutableModel):
    """
    Represents an algebraic surface by the coefficients of its defining equation.

    Coefficients are matched by position when two surfaces are compared, so
    their order is significant. Two surfaces are only comparable when they
    share the same kind label and the same number of coefficients.
    """
    id: int = Field(description="Nonzero identifier, unique within a collection")
    kind: str = Field(description="Category label, e.g. 'plane', 'sphere', 'cylinder'")
    coefficients: List[float] = Field(description="Ordered equation coefficients")

    @field_validator("id")
    @classmethod
    def validate_id(cls, value: int) -> int:
        """A zero id cannot carry a match in the signed output encoding."""
        if value == 0:
            raise ValueError("Surface id must be nonzero")
        return value

    @field_validator("coefficients")
    @classmethod
    def validate_coefficients(cls, values: List[float]) -> List[float]:
        """Validate that coefficients are finite numbers."""
        for index, value in enumerate(values):
            if not math.isfinite(value):
                raise ValueError(f"Coefficient {index} must be a finite number, got {value}")
        return values

    @model_validator(mode="after")
    def validate_kind(self):
        """Objects carrying the plane label must be built as Plane."""
        if self.kind == PLANE_KIND and not isinstance(self, Plane):
            raise ValueError(f"Objects of kind '{PLANE_KIND}' must be created as Plane")
        return self

    @property
    def is_plane(self) -> bool:
        return self.kind == PLANE_KIND

    def is_comparable_to(self, other: "Surface") -> bool:
        """Check that both objects share kind and coefficient count."""
        return self.kind == other.kind and len(self.coefficients) == len(other.coefficients)

    def scale_factor(self, other: "Surface") -> float:
        """
        Factor applied to own coefficients before comparing with other's.

        General surfaces are compared as given, without scale normalization.
        """
        return 1.0

    def scaled(self, factor: float) -> "Surface":
        """Return a copy with every coefficient multiplied by factor."""
        return self.with_changes(coefficients=[value * factor for value in self.coefficients])

    def negated(self) -> "Surface":
        """Return a copy with every coefficient negated."""
        return self.scaled(-1.0)

    def __str__(self) -> str:
        coefficients_str = ", ".join(str(value) for value in self.coefficients)
        return f"{self.__class__.__name__}({self.id}, {self.kind}, [{coefficients_str}])"


class Plane(Surface):
    """
    Represents a plane a*x + b*y + c*z + d = 0.

    A plane equation is only defined up to a nonzero factor, so before
    comparison the plane's coefficients are brought to the scale of the other
    plane (see domain.geometry.alignment).
    """
    kind: str = Field(default=PLANE_KIND, description="Always 'plane'")

    @field_validator("kind")
    @classmethod
    def validate_plane_kind(cls, value: str) -> str:
        if value != PLANE_KIND:
            raise ValueError(f"Plane kind must be '{PLANE_KIND}', got '{value}'")
        return value

    def scale_factor(self, other: "Surface") -> float:
        """
        Scale ratio towards other's coefficients.

        All-zero planes are accepted when built; they only fail here, when a
        pair actually needs the ratio.

        Raises:
            DegenerateCoefficientsError: If either plane has no nonzero coefficient
        """
        return scale_ratio(self.coefficients, other.coefficients)


def build_geometric_object(id: int, kind: str, coefficients: List[float]) -> Surface:
    """Create a Plane for the plane kind and a Surface for any other kind."""
    if kind == PLANE_KIND:
        return Plane(id=id, kind=kind, coefficients=coefficients)
    return Surface(id=id, kind=kind, coefficients=coefficients)
