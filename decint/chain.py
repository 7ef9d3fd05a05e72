from contextlib import contextmanager
from typing import Iterable, Iterator, List, Tuple

from decint.errors import AllocationFailure, InvariantViolation

RADIX = 10 ** 9
BLOCK_DIGITS = 9


def check_limb(value: int, context: str = "") -> int:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value < RADIX:
        raise InvariantViolation(value, context)
    return value


@contextmanager
def allocating(limbs: int):
    """Turns MemoryError raised while growing a limb sequence into AllocationFailure."""
    try:
        yield
    except MemoryError as e:
        if isinstance(e, AllocationFailure):
            raise
        raise AllocationFailure(limbs) from e


class LimbChain:
    """
    Little-endian sequence of base 10^9 limbs.

    Index 0 is the least significant limb. The chain copies the list it is given,
    so no two chains share storage.
    """

    def __init__(self, limbs: Iterable[int] = ()):
        with allocating(0):
            self.array: List[int] = list(limbs)

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> 'LimbChain':
        res = cls()
        for v in limbs:
            res.append(v)
        return res

    def prepend(self, value: int):
        check_limb(value, "prepend")
        with allocating(len(self.array) + 1):
            self.array.insert(0, value)

    def append(self, value: int):
        check_limb(value, "append")
        with allocating(len(self.array) + 1):
            self.array.append(value)

    def clone(self) -> 'LimbChain':
        return LimbChain(self.array)

    def shift(self, by_limbs: int) -> 'LimbChain':
        if self.is_zero():
            return self.clone()
        res = LimbChain()
        with allocating(len(self.array) + by_limbs):
            res.array = [0] * by_limbs + self.array
        return res

    def split(self, at: int) -> Tuple['LimbChain', 'LimbChain']:
        low = LimbChain(self.array[:at] or [0])
        high = LimbChain(self.array[at:] or [0])
        return low, high

    def trim(self) -> 'LimbChain':
        while len(self.array) > 1 and self.array[-1] == 0:
            self.array.pop()
        if not self.array:
            self.array.append(0)
        return self

    def top(self) -> int:
        return self.array[-1]

    def is_zero(self) -> bool:
        return all(v == 0 for v in self.array)

    def __len__(self):
        return len(self.array)

    def __getitem__(self, item):
        return self.array[item]

    def __iter__(self) -> Iterator[int]:
        return iter(self.array)

    def __eq__(self, other):
        if not isinstance(other, LimbChain):
            return NotImplemented
        return self.array == other.array

    def __repr__(self):
        return f"LimbChain({self.array})"
