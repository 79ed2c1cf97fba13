# domain/comparison/engine.py
"""
Pairwise comparison of a collection of planes and surfaces.
"""
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from domain.comparison.consensus import classify
from domain.comparison.pairs import enumerate_pairs
from domain.geometry.constants import PLANE_KIND
from domain.geometry.surface import Surface
from domain.geometry.tolerance import Classification, ToleranceStrategy
from utils.constants import DEFAULT_MAX_WORKERS

logger = logging.getLogger(__name__)


def decode_match(value: int) -> Tuple[int, Classification]:
    """
    Split an output value into the partner id and the classification.

    Only unambiguous for positive ids: with signed ids, 3 may be partner 3
    Same or partner -3 Opposite.

    Args:
        value: Encoded value, partner_id * (+1 | -1)

    Returns:
        Tuple of (partner_id, SAME or OPPOSITE)

    Raises:
        ValueError: If value is zero
    """
    if value == 0:
        raise ValueError("Zero does not encode a match")
    if value > 0:
        return value, Classification.SAME
    return -value, Classification.OPPOSITE


class ComparisonEngine:
    """
    Classifies every pair of objects within the planes and within the surfaces.

    Planes are only compared with planes and surfaces only with surfaces.
    Plane pairs run on a thread pool; surface pairs run sequentially once
    the plane results are merged. For each non-Different pair (id0, id1),
    output[id1] = id0 * code. When an id matches more than once the last
    pair written wins, in ascending-id pair order, planes before surfaces.
    """

    def __init__(self, strategy: ToleranceStrategy,
                 max_workers: Optional[int] = DEFAULT_MAX_WORKERS) -> None:
        """
        Initialize the engine.

        Args:
            strategy: Scalar tolerance used for every pair of this engine
            max_workers: Thread count for the plane fan-out (None for the
                executor default)
        """
        self.strategy = strategy
        self.max_workers = max_workers

    @staticmethod
    def partition(objects: Iterable[Surface]) -> Tuple[Dict[int, Surface], Dict[int, Surface]]:
        """
        Split objects into planes and surfaces keyed by id.

        Raises:
            ValueError: If two objects share an id
        """
        planes: Dict[int, Surface] = {}
        surfaces: Dict[int, Surface] = {}
        for obj in objects:
            if obj.id in planes or obj.id in surfaces:
                raise ValueError(f"Duplicate object id {obj.id}")
            if obj.kind == PLANE_KIND:
                planes[obj.id] = obj
            else:
                surfaces[obj.id] = obj
        return planes, surfaces

    def evaluate_pair(self, first: Surface, second: Surface) -> Optional[Tuple[int, int]]:
        """Return (second.id, first.id * code), or None if the pair is Different."""
        result = classify(first, second, self.strategy)
        if result == Classification.DIFFERENT:
            return None
        logger.debug(f"{first.id} and {second.id} classified as {result.name}")
        return second.id, first.id * result.value

    def compare(self, objects: Iterable[Surface]) -> Dict[int, int]:
        """
        Compare all pairs and build the id -> signed partner mapping.

        Objects without any Same or Opposite partner are absent from the
        result. Any error raised while classifying a pair aborts the whole
        comparison.
        """
        planes, surfaces = self.partition(objects)
        logger.info(f"Comparing {len(planes)} planes and {len(surfaces)} surfaces "
                    f"with {self.strategy.__class__.__name__}")

        same_opposite: Dict[int, int] = {}
        for key, value in self._compare_planes(planes):
            same_opposite[key] = value

        surface_matches = 0
        for id0, id1 in enumerate_pairs(sorted(surfaces)):
            match = self.evaluate_pair(surfaces[id0], surfaces[id1])
            if match is not None:
                key, value = match
                same_opposite[key] = value
                surface_matches += 1

        logger.info(f"Found {surface_matches} surface matches; {len(same_opposite)} objects matched")
        return same_opposite

    def _compare_planes(self, planes: Dict[int, Surface]) -> List[Tuple[int, int]]:
        """Evaluate plane pairs in parallel; results keep pair enumeration order."""
        pairs = list(enumerate_pairs(sorted(planes)))
        if not pairs:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            # map() yields in submission order and re-raises task errors here
            results = list(executor.map(
                lambda pair: self.evaluate_pair(planes[pair[0]], planes[pair[1]]),
                pairs
            ))

        matches = [match for match in results if match is not None]
        logger.info(f"Compared {len(pairs)} plane pairs, {len(matches)} matches")
        return matches
