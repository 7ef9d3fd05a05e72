from functools import total_ordering
from typing import Iterable, Tuple

from decint.chain import RADIX, LimbChain, check_limb

POSITIVE = 1
NEGATIVE = -1


@total_ordering
class BigInt:
    """
    Signed arbitrary-precision integer stored as base 10^9 limbs.

    Values are immutable once constructed and own their limbs exclusively.
    Zero always carries the positive sign.
    """

    __slots__ = ('_sign', '_chain')

    def __init__(self, sign: int, chain: LimbChain):
        self._set(sign, chain.clone())

    def _set(self, sign: int, chain: LimbChain):
        if sign not in (POSITIVE, NEGATIVE):
            raise ValueError(f"Unsupported sign: {sign}")
        self._chain = chain.trim()
        self._sign = POSITIVE if chain.is_zero() else sign

    @classmethod
    def _adopt(cls, sign: int, chain: LimbChain) -> 'BigInt':
        """Takes ownership of a freshly built chain without copying it."""
        res = cls.__new__(cls)
        res._set(sign, chain)
        return res

    @classmethod
    def zero(cls) -> 'BigInt':
        return cls._adopt(POSITIVE, LimbChain([0]))

    @classmethod
    def one(cls) -> 'BigInt':
        return cls._adopt(POSITIVE, LimbChain([1]))

    @classmethod
    def from_limb(cls, value: int) -> 'BigInt':
        return cls._adopt(POSITIVE, LimbChain([check_limb(value, "from_limb")]))

    @classmethod
    def from_limbs(cls, limbs: Iterable[int], sign: int = POSITIVE) -> 'BigInt':
        return cls._adopt(sign, LimbChain.from_limbs(limbs))

    @classmethod
    def parse(cls, text: str) -> 'BigInt':
        from decint.parser import parse_number
        return parse_number(text)

    @property
    def sign(self) -> int:
        return self._sign

    @property
    def limbs(self) -> Tuple[int, ...]:
        return tuple(self._chain)

    @property
    def length(self) -> int:
        return len(self._chain)

    def top(self) -> int:
        return self._chain.top()

    def is_zero(self) -> bool:
        return len(self._chain) == 1 and self._chain[0] == 0

    def is_negative(self) -> bool:
        return self._sign == NEGATIVE and not self.is_zero()

    def clone(self) -> 'BigInt':
        return BigInt._adopt(self._sign, self._chain.clone())

    def with_sign(self, sign: int) -> 'BigInt':
        return BigInt._adopt(sign, self._chain.clone())

    def negate(self) -> 'BigInt':
        return self.with_sign(-self._sign)

    def magnitude(self) -> 'BigInt':
        return self.with_sign(POSITIVE)

    def shift(self, by_limbs: int) -> 'BigInt':
        """Multiplies by RADIX ** by_limbs."""
        return BigInt._adopt(self._sign, self._chain.shift(by_limbs))

    def split(self, at: int) -> Tuple['BigInt', 'BigInt']:
        """Returns magnitudes (low, high) so that |self| == high * RADIX ** at + low."""
        low, high = self._chain.split(at)
        return BigInt._adopt(POSITIVE, low), BigInt._adopt(POSITIVE, high)

    def __eq__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        from decint.compare import Ordering, compare
        return compare(self, other) == Ordering.EQUAL

    def __lt__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        from decint.compare import Ordering, compare
        return compare(self, other) == Ordering.LESS

    def __hash__(self):
        return hash((self._sign, tuple(self._chain)))

    def __add__(self, other):
        from decint.additive import add
        return add(self, other)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.magnitude()

    def __sub__(self, other):
        from decint.additive import subtract
        return subtract(self, other)

    def __mul__(self, other):
        from decint.multiplicative import multiply_karatsuba
        return multiply_karatsuba(self, other)

    # Truncating division: the quotient rounds toward zero.
    def __truediv__(self, other):
        from decint.division import divide
        return divide(self, other)[0]

    def __mod__(self, other):
        from decint.division import divide
        return divide(self, other)[1]

    def __divmod__(self, other):
        from decint.division import divide
        return divide(self, other)

    def __bool__(self):
        return not self.is_zero()

    def __int__(self):
        res = 0
        for v in reversed(self._chain.array):
            res = res * RADIX + v
        return -res if self._sign == NEGATIVE else res

    def __str__(self):
        from decint.formatter import format_number
        return format_number(self)

    def __repr__(self):
        return f"BigInt({str(self)!r})"
