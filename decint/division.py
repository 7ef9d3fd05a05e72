from typing import Tuple

from decint.additive import add_magnitudes, sub_magnitudes
from decint.chain import RADIX, LimbChain
from decint.compare import Ordering, compare_magnitude
from decint.errors import DivisionByZero
from decint.multiplicative import multiply_naive
from decint.number import BigInt


def _leading_value(value: BigInt, start: int) -> int:
    res = 0
    limbs = value.limbs
    for i in range(len(limbs) - 1, max(start, 0) - 1, -1):
        res = res * RADIX + limbs[i]
    return res


def estimate_quotient_limb(remainder: BigInt, divisor: BigInt) -> int:
    """
    Trial quotient limb for remainder / divisor, assuming divisor <= remainder < divisor * RADIX.

    The top two divisor limbs are divided into the matching top limbs of the remainder,
    so the estimate is never below the true limb and exceeds it by at most two.
    """
    start = divisor.length - 2
    top_divisor = max(_leading_value(divisor, start), 1)
    q = _leading_value(remainder, start) // top_divisor
    return min(max(q, 1), RADIX - 1)


def divide(dividend: BigInt, divisor: BigInt) -> Tuple[BigInt, BigInt]:
    """
    Truncating long division.

    Returns (quotient, remainder) with dividend == quotient * divisor + remainder,
    |remainder| < |divisor| and the remainder carrying the dividend's sign.
    """
    if divisor.is_zero():
        raise DivisionByZero(f"dividend has {dividend.length} limbs")
    if dividend.is_zero():
        return BigInt.zero(), BigInt.zero()

    divisor_pos = divisor.magnitude()
    if compare_magnitude(dividend, divisor_pos) == Ordering.LESS:
        return BigInt.zero(), dividend.clone()

    quotient = LimbChain()
    remainder = BigInt.zero()
    for limb in reversed(dividend.limbs):
        remainder = add_magnitudes(remainder.shift(1), BigInt.from_limb(limb))
        q = 0
        if compare_magnitude(remainder, divisor_pos) != Ordering.LESS:
            q = estimate_quotient_limb(remainder, divisor_pos)
            product = multiply_naive(divisor_pos, BigInt.from_limb(q))
            while compare_magnitude(product, remainder) == Ordering.GREATER:
                q -= 1
                product = multiply_naive(divisor_pos, BigInt.from_limb(q))
            remainder = sub_magnitudes(remainder, product)
        # Limbs arrive most significant first.
        quotient.prepend(q)

    return BigInt._adopt(dividend.sign * divisor.sign, quotient), remainder.with_sign(dividend.sign)
