"""
Module: builder.partition.assigner

Purpose:
    Balanced random assignment of tile indices to groups.
    Round-robin assignment keeps group sizes within one of each other;
    a Fisher-Yates shuffle then randomizes which tile lands where.

Key Functions:
    - balanced_assignments(): Round-robin group ids
    - shuffle_in_place(): Fisher-Yates shuffle with an injectable source
    - assign_tiles(): Shuffled balanced assignment for a grid

Dependencies:
    - random (std)

Used By:
    - builder.partition.partitioner: Tile bucketing
"""

from __future__ import annotations

import logging
import random
from typing import List, MutableSequence, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def balanced_assignments(total: int, num_groups: int) -> List[int]:
    """
    Assign ``total`` items to ``num_groups`` groups round-robin.

    Args:
        total: Number of items
        num_groups: Number of groups

    Returns:
        List where item i holds group ``i % num_groups``

    Raises:
        ValueError: If total is negative or num_groups not positive

    Example:
        >>> balanced_assignments(5, 2)
        [0, 1, 0, 1, 0]
    """
    if total < 0:
        raise ValueError(f"total must be non-negative: {total}")
    if num_groups <= 0:
        raise ValueError(f"num_groups must be positive: {num_groups}")
    return [i % num_groups for i in range(total)]


def shuffle_in_place(items: MutableSequence[T], rng: random.Random) -> MutableSequence[T]:
    """
    Fisher-Yates shuffle, walking from the last index down.

    Only ``rng.random()`` is used, so any object with that method can
    drive the shuffle (tests inject fixed sequences).

    Args:
        items: Sequence to shuffle in place
        rng: Uniform source of floats in [0, 1)

    Returns:
        The same sequence, for chaining
    """
    for i in range(len(items) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        items[i], items[j] = items[j], items[i]
    return items


def assign_tiles(
    grid_size: int,
    num_groups: int,
    rng: Optional[random.Random] = None,
) -> tuple[int, ...]:
    """
    Build the shuffled group assignment for a ``grid_size`` square grid.

    Group sizes differ by at most one. The shuffle only permutes the
    assignment list, so per-group counts never depend on the random source.

    Args:
        grid_size: Tiles per side
        num_groups: Number of groups
        rng: Random source (None = fresh unseeded generator)

    Returns:
        Tuple mapping tile linear index to group id

    Raises:
        ValueError: If grid_size or num_groups is not positive

    Example:
        >>> sorted(assign_tiles(2, 2, random.Random(7)))
        [0, 0, 1, 1]
    """
    if grid_size <= 0:
        raise ValueError(f"grid_size must be positive: {grid_size}")

    total = grid_size * grid_size
    assignments = balanced_assignments(total, num_groups)
    shuffle_in_place(assignments, rng if rng is not None else random.Random())

    if num_groups > total:
        logger.debug(
            f"{num_groups} groups for {total} tiles: "
            f"{num_groups - total} groups will be empty"
        )

    return tuple(assignments)
