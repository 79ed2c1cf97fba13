"""
Input record model for the surfaces comparison.

Records arrive as a mapping of integer id to {"kind": ..., "coefficients": [...]},
either as Python objects or as JSON text. They are validated here and turned
into domain objects; the comparison itself assumes well-formed input.
"""
from typing import Annotated, Any, Dict, List, Mapping
import logging

from pydantic import Field, Strict, TypeAdapter

from domain.geometry.surface import Surface, build_geometric_object
from utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class SurfaceRecord(ImmutableModel):
    """Boundary shape of one input object; unknown keys are ignored."""
    kind: str = Field(description="Category label")
    # Strict items: numeric strings and bools are rejected, ints are accepted
    coefficients: List[Annotated[float, Strict()]] = Field(description="Ordered equation coefficients")


RECORDS_ADAPTER = TypeAdapter(Dict[int, SurfaceRecord])


def build_objects(records: Dict[int, SurfaceRecord]) -> List[Surface]:
    """Create a Plane or Surface for every validated record."""
    objects = [
        build_geometric_object(id=object_id, kind=record.kind, coefficients=record.coefficients)
        for object_id, record in records.items()
    ]
    logger.info(f"Built {len(objects)} geometric objects from input records")
    return objects


def parse_records(raw: Mapping[Any, Any]) -> List[Surface]:
    """
    Validate a mapping of id -> record and build the domain objects.

    Raises:
        pydantic.ValidationError: If a record is missing a field or has a
            field of the wrong type, or an object fails domain validation
    """
    return build_objects(RECORDS_ADAPTER.validate_python(raw))


def parse_records_json(text: str) -> List[Surface]:
    """Same as parse_records, for a JSON object keyed by id."""
    return build_objects(RECORDS_ADAPTER.validate_json(text))
