# constraints.py

from typing import List

from .constants import MAX_NUM, MIN_NUM


class ConstraintSet:
    """
    Values already used by one row, column or block, kept as a bitmask.
    Bit v is set iff a cell of the unit currently holds v.
    """

    __slots__ = ("_mask",)

    def __init__(self) -> None:
        self._mask = 0

    def is_used(self, v: int) -> bool:
        return bool(self._mask & (1 << v))

    def mark(self, v: int) -> None:
        assert MIN_NUM <= v <= MAX_NUM, f"Value {v} out of range"
        assert not self.is_used(v), f"Value {v} already used"
        self._mask |= 1 << v

    def clear(self, v: int) -> None:
        assert MIN_NUM <= v <= MAX_NUM, f"Value {v} out of range"
        assert self.is_used(v), f"Value {v} is not used"
        self._mask &= ~(1 << v)

    def used(self) -> List[int]:
        """Used values in ascending order."""
        return [v for v in range(MIN_NUM, MAX_NUM + 1) if self.is_used(v)]

    def __len__(self) -> int:
        return bin(self._mask).count("1")

    def __repr__(self) -> str:
        return f"ConstraintSet({self.used()})"
