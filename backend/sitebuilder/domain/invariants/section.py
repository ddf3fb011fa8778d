from typing import Iterable, Optional, Set
from .exceptions import InvariantViolation


def assert_dense_positions(positions: Iterable[int]) -> None:
    """
    Section positions of one page must be exactly {0, ..., N-1}.
    """
    positions = list(positions)
    expected = list(range(len(positions)))

    if sorted(positions) != expected:
        raise InvariantViolation(
            f"Section positions are not dense starting from 0: {sorted(positions)}"
        )


def assert_unique_anchors(anchor_ids: Iterable[Optional[str]]) -> None:
    seen: Set[str] = set()
    for anchor_id in anchor_ids:
        if anchor_id is None:
            continue
        if anchor_id in seen:
            raise InvariantViolation(f"Duplicate anchor id on page: {anchor_id}")
        seen.add(anchor_id)
