from enum import IntEnum

from decint.number import NEGATIVE, POSITIVE, BigInt


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare_magnitude(a: BigInt, b: BigInt) -> Ordering:
    if a.length != b.length:
        return Ordering.GREATER if a.length > b.length else Ordering.LESS
    a_limbs, b_limbs = a.limbs, b.limbs
    for i in range(a.length - 1, -1, -1):
        if a_limbs[i] > b_limbs[i]:
            return Ordering.GREATER
        elif a_limbs[i] < b_limbs[i]:
            return Ordering.LESS
    return Ordering.EQUAL


def compare(a: BigInt, b: BigInt) -> Ordering:
    a_zero, b_zero = a.is_zero(), b.is_zero()
    if a_zero and b_zero:
        return Ordering.EQUAL
    a_sign = POSITIVE if a_zero else a.sign
    b_sign = POSITIVE if b_zero else b.sign
    if a_sign != b_sign:
        return Ordering.GREATER if a_sign > b_sign else Ordering.LESS
    res = compare_magnitude(a, b)
    if a_sign == NEGATIVE:
        return Ordering(-res)
    return res
