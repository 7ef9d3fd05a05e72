import itertools
import random
import unittest

from decint.compare import Ordering, compare, compare_magnitude
from decint.number import NEGATIVE, BigInt
from decint.parser import parse_number


def n(text):
    return parse_number(text)


class TestCompare(unittest.TestCase):
    def test_reference_cases(self):
        a = n("12345678901234567890")
        b = n("12345678901234567890")
        c = n("98765432109876543210")
        d = n("-12345678901234567890")
        self.assertEqual(compare(a, b), Ordering.EQUAL)
        self.assertEqual(compare(a, c), Ordering.LESS)
        self.assertEqual(compare(c, a), Ordering.GREATER)
        self.assertEqual(compare(a, d), Ordering.GREATER)
        self.assertEqual(compare(d, a), Ordering.LESS)
        self.assertEqual(compare(d, d), Ordering.EQUAL)

    def test_negative_lengths_invert(self):
        """A longer negative number is the smaller one."""
        self.assertEqual(compare(n("-1000000000000"), n("-5")), Ordering.LESS)
        self.assertEqual(compare(n("-5"), n("-1000000000000")), Ordering.GREATER)
        self.assertEqual(compare(n("-7"), n("-5")), Ordering.LESS)

    def test_zero_sign_ignored(self):
        """+0 and -0 compare equal whatever sign was supplied."""
        plus_zero = BigInt.zero()
        minus_zero = BigInt.from_limbs([0], NEGATIVE)
        self.assertEqual(compare(plus_zero, minus_zero), Ordering.EQUAL)
        self.assertEqual(compare(minus_zero, n("1")), Ordering.LESS)
        self.assertEqual(compare(minus_zero, n("-1")), Ordering.GREATER)

    def test_magnitude_ignores_sign(self):
        self.assertEqual(compare_magnitude(n("-9"), n("5")), Ordering.GREATER)
        self.assertEqual(compare_magnitude(n("-5"), n("5")), Ordering.EQUAL)
        self.assertEqual(compare_magnitude(n("1999999999"), n("2000000000")), Ordering.LESS)

    def test_matches_builtin_order(self):
        """compare agrees with int ordering, so it is antisymmetric and transitive."""
        rng = random.Random(7)
        values = [0, 1, -1, 10 ** 9, -10 ** 9, 10 ** 9 - 1]
        values += [rng.randint(-10 ** 40, 10 ** 40) for _ in range(20)]
        for x, y in itertools.product(values, repeat=2):
            expected = (x > y) - (x < y)
            with self.subTest(x=x, y=y):
                self.assertEqual(int(compare(n(str(x)), n(str(y)))), expected)

    def test_operators(self):
        self.assertTrue(n("-3") < n("2"))
        self.assertTrue(n("2") <= n("2"))
        self.assertTrue(n("1000000000") > n("999999999"))
        self.assertEqual(n("15"), n("+15"))
        self.assertNotEqual(n("15"), n("-15"))
        self.assertEqual(sorted([n("3"), n("-10"), n("0")]), [n("-10"), n("0"), n("3")])

    def test_hash_consistent_with_equality(self):
        self.assertEqual(hash(n("-0")), hash(n("0")))
        self.assertEqual(len({n("12"), n("+12"), n("0012")}), 1)


if __name__ == '__main__':
    unittest.main()
