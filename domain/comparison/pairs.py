# domain/comparison/pairs.py
from typing import Iterable, Iterator, Tuple


def enumerate_pairs(ids: Iterable[int]) -> Iterator[Tuple[int, int]]:
    """
    Yield every unordered pair of distinct ids exactly once.

    Pairs follow the iteration order of ids: (ids[i], ids[j]) for i < j.
    Callers that need a reproducible order should pass sorted ids.

    Raises:
        ValueError: If an id appears more than once
    """
    id_list = list(ids)
    if len(set(id_list)) != len(id_list):
        raise ValueError("Ids must be unique to enumerate pairs")

    for i, first in enumerate(id_list):
        for second in id_list[i + 1:]:
            yield first, second
