import unittest

from decint.chain import RADIX, LimbChain
from decint.errors import AllocationFailure, BigIntError, InvariantViolation
from decint.number import NEGATIVE, BigInt


class ExhaustedList(list):
    def append(self, value):
        raise MemoryError()

    def insert(self, index, value):
        raise MemoryError()


class TestLimbChain(unittest.TestCase):
    def test_append_and_prepend(self):
        """append grows the most significant end, prepend the least significant one."""
        chain = LimbChain()
        chain.append(3)
        chain.prepend(2)
        chain.prepend(1)
        self.assertEqual(list(chain), [1, 2, 3])
        self.assertEqual(chain.top(), 3)
        self.assertEqual(len(chain), 3)

    def test_limb_out_of_range(self):
        """Limbs must stay in [0, RADIX)."""
        chain = LimbChain()
        with self.assertRaises(InvariantViolation):
            chain.append(RADIX)
        with self.assertRaises(InvariantViolation):
            chain.prepend(-1)
        with self.assertRaises(InvariantViolation):
            LimbChain.from_limbs([1, RADIX + 5])
        self.assertEqual(len(chain), 0)

    def test_invariant_violation_carries_value(self):
        with self.assertRaises(InvariantViolation) as ctx:
            BigInt.from_limb(RADIX)
        self.assertEqual(ctx.exception.value, RADIX)

    def test_invariant_violation_is_not_an_assertion(self):
        """Limb range bugs are value errors, not assertion failures."""
        with self.assertRaises(InvariantViolation) as ctx:
            LimbChain().append(-5)
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertIsInstance(ctx.exception, BigIntError)
        self.assertNotIsInstance(ctx.exception, AssertionError)

    def test_chain_copies_given_list(self):
        source = [1, 2]
        chain = LimbChain(source)
        source.append(3)
        self.assertEqual(list(chain), [1, 2])

    def test_exhausted_memory_on_append(self):
        """Running out of memory while growing surfaces as AllocationFailure."""
        chain = LimbChain.from_limbs([1, 2])
        chain.array = ExhaustedList(chain.array)
        with self.assertRaises(AllocationFailure) as ctx:
            chain.append(3)
        self.assertEqual(ctx.exception.limbs, 3)
        self.assertIsInstance(ctx.exception, MemoryError)
        with self.assertRaises(AllocationFailure):
            chain.prepend(0)
        self.assertEqual(list(chain), [1, 2])

    def test_exhausted_memory_on_shift(self):
        with self.assertRaises(AllocationFailure):
            LimbChain.from_limbs([1]).shift(2 ** 62)

    def test_clone_is_independent(self):
        """Mutating a clone leaves the original untouched."""
        original = LimbChain.from_limbs([4, 5])
        copy = original.clone()
        copy.append(6)
        self.assertEqual(list(original), [4, 5])
        self.assertEqual(list(copy), [4, 5, 6])

    def test_shift(self):
        """Shifting prepends zero limbs to a copy."""
        original = LimbChain.from_limbs([5, 7])
        shifted = original.shift(2)
        self.assertEqual(list(shifted), [0, 0, 5, 7])
        self.assertEqual(list(original), [5, 7])

    def test_shift_zero_value(self):
        """Zero stays a single limb after shifting."""
        self.assertEqual(list(LimbChain.from_limbs([0]).shift(3)), [0])

    def test_split(self):
        low, high = LimbChain.from_limbs([1, 2, 3]).split(1)
        self.assertEqual(list(low), [1])
        self.assertEqual(list(high), [2, 3])

    def test_split_beyond_length(self):
        """An empty high half becomes a single zero limb."""
        low, high = LimbChain.from_limbs([1, 2, 3]).split(5)
        self.assertEqual(list(low), [1, 2, 3])
        self.assertEqual(list(high), [0])

    def test_trim(self):
        self.assertEqual(list(LimbChain.from_limbs([7, 0, 0]).trim()), [7])
        self.assertEqual(list(LimbChain.from_limbs([0, 0]).trim()), [0])
        self.assertEqual(list(LimbChain().trim()), [0])


class TestBigIntConstruction(unittest.TestCase):
    def test_zero_and_one(self):
        self.assertEqual(BigInt.zero().limbs, (0,))
        self.assertEqual(BigInt.one().limbs, (1,))
        self.assertTrue(BigInt.zero().is_zero())
        self.assertFalse(BigInt.one().is_zero())

    def test_leading_zero_limbs_are_dropped(self):
        value = BigInt.from_limbs([5, 0, 0])
        self.assertEqual(value.limbs, (5,))
        self.assertEqual(value.length, 1)

    def test_negative_zero_is_positive(self):
        """Zero is always stored with the positive sign."""
        value = BigInt.from_limbs([0], NEGATIVE)
        self.assertEqual(value.sign, 1)
        self.assertEqual(str(value), "0")
        self.assertEqual(value.negate(), BigInt.zero())

    def test_split_returns_magnitudes(self):
        low, high = BigInt.from_limbs([1, 2, 3], NEGATIVE).split(2)
        self.assertEqual(low.limbs, (1, 2))
        self.assertEqual(high.limbs, (3,))
        self.assertEqual(low.sign, 1)
        self.assertEqual(high.sign, 1)

    def test_shift_multiplies_by_radix(self):
        value = BigInt.from_limbs([123], NEGATIVE).shift(2)
        self.assertEqual(int(value), -123 * RADIX ** 2)

    def test_bigint_owns_its_limbs(self):
        """Mutating the chain a value was built from does not change the value."""
        source = LimbChain([1, 2])
        value = BigInt(1, source)
        source.append(5)
        source.array[0] = 7
        self.assertEqual(str(value), "2000000001")
        self.assertEqual(value.limbs, (1, 2))

    def test_construction_does_not_trim_source(self):
        source = LimbChain([4, 0, 0])
        value = BigInt(NEGATIVE, source)
        self.assertEqual(list(source), [4, 0, 0])
        self.assertEqual(value.limbs, (4,))

    def test_no_mutable_storage_exposed(self):
        value = BigInt.from_limbs([1, 2])
        self.assertFalse(hasattr(value, "chain"))
        with self.assertRaises(AttributeError):
            value.limbs.append(0)
        self.assertEqual(value.clone().limbs, (1, 2))

    def test_limbs_are_a_copy(self):
        value = BigInt.from_limbs([1, 2])
        limbs = value.limbs
        self.assertIsInstance(limbs, tuple)
        self.assertEqual(value.clone().limbs, limbs)


if __name__ == '__main__':
    unittest.main()
