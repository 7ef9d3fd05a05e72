from decint.additive import add_magnitudes, sub_magnitudes
from decint.chain import RADIX, LimbChain
from decint.number import POSITIVE, BigInt

KARATSUBA_THRESHOLD = 2


def multiply_by_limb(a: BigInt, limb: int) -> BigInt:
    """Magnitude of a times a single limb."""
    res = LimbChain()
    carry = 0
    for v in a.limbs:
        product = v * limb + carry
        res.append(product % RADIX)
        carry = product // RADIX
    if carry:
        res.append(carry)
    return BigInt._adopt(POSITIVE, res)


def multiply_naive(a: BigInt, b: BigInt) -> BigInt:
    res = BigInt.zero()
    for shift, limb in enumerate(b.limbs):
        if limb == 0:
            continue
        partial = multiply_by_limb(a, limb).shift(shift)
        res = add_magnitudes(res, partial)
    return res.with_sign(a.sign * b.sign)


def multiply_karatsuba(a: BigInt, b: BigInt) -> BigInt:
    if a.length <= KARATSUBA_THRESHOLD or b.length <= KARATSUBA_THRESHOLD:
        return multiply_naive(a, b)

    m = max(a.length, b.length) // 2
    low_a, high_a = a.split(m)
    low_b, high_b = b.split(m)

    z0 = multiply_karatsuba(low_a, low_b)
    z2 = multiply_karatsuba(high_a, high_b)
    # Split halves and partial products are magnitudes, so z1 never goes negative.
    z1 = multiply_karatsuba(add_magnitudes(low_a, high_a), add_magnitudes(low_b, high_b))
    z1 = sub_magnitudes(sub_magnitudes(z1, z2), z0)

    res = add_magnitudes(add_magnitudes(z2.shift(2 * m), z1.shift(m)), z0)
    return res.with_sign(a.sign * b.sign)
