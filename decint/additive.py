from decint.chain import RADIX, LimbChain
from decint.compare import Ordering, compare_magnitude
from decint.number import POSITIVE, BigInt


def add_magnitudes(a: BigInt, b: BigInt) -> BigInt:
    res = LimbChain()
    carry = 0
    a_limbs, b_limbs = a.limbs, b.limbs
    common = min(len(a_limbs), len(b_limbs))
    for i in range(common):
        s = a_limbs[i] + b_limbs[i] + carry
        res.append(s % RADIX)
        carry = s // RADIX
    longer = a_limbs if len(a_limbs) > len(b_limbs) else b_limbs
    for i in range(common, len(longer)):
        s = longer[i] + carry
        res.append(s % RADIX)
        carry = s // RADIX
    if carry:
        res.append(carry)
    return BigInt._adopt(POSITIVE, res)


def sub_magnitudes(a: BigInt, b: BigInt) -> BigInt:
    """|a| - |b|, requires |a| >= |b|."""
    res = LimbChain()
    borrow = 0
    a_limbs, b_limbs = a.limbs, b.limbs
    for i in range(len(a_limbs)):
        s = a_limbs[i] - (b_limbs[i] if i < len(b_limbs) else 0) - borrow
        if s < 0:
            s += RADIX
            borrow = 1
        else:
            borrow = 0
        res.append(s)
    return BigInt._adopt(POSITIVE, res)


def add(a: BigInt, b: BigInt) -> BigInt:
    if a.sign == b.sign:
        return add_magnitudes(a, b).with_sign(a.sign)
    cmp = compare_magnitude(a, b)
    if cmp == Ordering.EQUAL:
        return BigInt.zero()
    if cmp == Ordering.GREATER:
        return sub_magnitudes(a, b).with_sign(a.sign)
    return sub_magnitudes(b, a).with_sign(b.sign)


def subtract(a: BigInt, b: BigInt) -> BigInt:
    return add(a, b.negate())
