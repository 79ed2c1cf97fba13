#!/usr/bin/env python3
# surfaces_comparison.py
"""
Surfaces comparison - Main package module

Classifies every pair of planes and every pair of other surfaces as the same
object, the same object with opposite orientation, or different objects.
"""
__version__ = "1.0"

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from domain.comparison.engine import ComparisonEngine
from domain.geometry.tolerance import strategy_for_mode
from models.surface_record import parse_records, parse_records_json
from utils.constants import (
    DEFAULT_MODE, DEFAULT_MAX_WORKERS, DYNAMIC_MODE, FIXED_MODE,
    LOG_FORMAT, LOG_DATE_FORMAT
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    datefmt=LOG_DATE_FORMAT
)

logger = logging.getLogger(__name__)

__all__ = [
    'compare',
    'main',
]


def compare(surfaces: Mapping[Any, Any], mode: str = DEFAULT_MODE,
            max_workers: Optional[int] = DEFAULT_MAX_WORKERS) -> Dict[int, int]:
    """
    Compare every pair of planes and every pair of surfaces.

    Planes are scale-aligned before comparison in both modes, so planes that
    differ only by a positive factor are Same under the fixed tolerance too
    (e.g. [1, 2, 3, 4] and [2, 4, 6, 8] give {2: 1} in the default mode).
    Other surfaces are never scale-aligned.

    Args:
        surfaces: Mapping of nonzero integer id to
            {"kind": str, "coefficients": [float, ...]}
        mode: "Dynamic" for the relative tolerance, anything else for the
            fixed tolerance
        max_workers: Thread count for the plane comparisons

    Returns:
        Mapping of id to partner_id * (+1 for Same, -1 for Opposite);
        ids without a match are absent

    Raises:
        pydantic.ValidationError: If the input records are malformed
        DegenerateCoefficientsError: If a compared pair has only zero coefficients,
            or a compared plane is all zero
    """
    objects = parse_records(surfaces)
    engine = ComparisonEngine(strategy_for_mode(mode), max_workers=max_workers)
    return engine.compare(objects)


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point: compare the records of a JSON file."""
    parser = argparse.ArgumentParser(
        description="Find planes and surfaces that describe the same geometry"
    )
    parser.add_argument("input", help="JSON file mapping ids to {kind, coefficients} records")
    parser.add_argument("--mode", default=DEFAULT_MODE,
                        help=f"'{DYNAMIC_MODE}' for relative tolerance, "
                             f"anything else (default '{FIXED_MODE}') for fixed tolerance")
    parser.add_argument("--workers", type=int, default=DEFAULT_MAX_WORKERS,
                        help="Worker threads for plane comparisons")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each matched pair")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        with open(args.input, 'r') as file:
            objects = parse_records_json(file.read())
    except OSError as e:
        logger.error(f"Error reading {args.input}: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid input records in {args.input}: {e}")
        return 1

    engine = ComparisonEngine(strategy_for_mode(args.mode), max_workers=args.workers)
    try:
        same_opposite = engine.compare(objects)
    except ValueError as e:
        logger.error(f"Comparison failed: {e}")
        return 1

    json.dump({str(key): value for key, value in same_opposite.items()}, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


# This allows running the module directly
if __name__ == "__main__":
    sys.exit(main())
