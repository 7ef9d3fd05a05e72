import random

from decint.bench import random_bigint, time_multiplication
from decint.compare import compare
from decint.division import divide
from decint.formatter import Formatter
from decint.multiplicative import multiply_karatsuba, multiply_naive
from decint.number import BigInt
from decint.parser import parse_number

PI_DIGITS = "314159265358979323846264338327950288419716939937510"
E_DIGITS = "271828182845904523536028747135266249775724709369995"


def show_limbs(formatter: Formatter):
    for label, value in (("x", parse_number("123456789012345678901234567890")),
                         ("y", parse_number("-98765432109876543210")),
                         ("z", BigInt.from_limbs([1, 2, 3]))):
        print(f"{label} = {formatter.format(value)}")
        print(formatter.format_limbs(value))
        print()


def show_comparisons():
    a = parse_number("12345678901234567890")
    b = parse_number("12345678901234567890")
    c = parse_number("98765432109876543210")
    d = parse_number("-12345678901234567890")
    for name, x, y, expected in (("a vs b", a, b, 0), ("a vs c", a, c, -1), ("c vs a", c, a, 1),
                                 ("a vs d", a, d, 1), ("d vs a", d, a, -1), ("d vs d", d, d, 0)):
        print(f"{name}: {int(compare(x, y))} (expected {expected})")


def show_additions(formatter: Formatter):
    print("\nAdditions:")
    cases = [
        ("123456789012345678901234567890", "987654321098765432109876543210"),
        ("-123456789", "-987654321"),
        ("1000000000000000000", "-999999999999999999"),
        ("123456789", "-123456789"),
    ]
    for idx, (x, y) in enumerate(cases, start=1):
        a, b = parse_number(x), parse_number(y)
        print(f"Sum {idx}: {formatter.format(a)} + {formatter.format(b)} = {formatter.format(a + b)}")


def show_products(formatter: Formatter, rng: random.Random):
    print("\n=== Fixed multiplication ===")
    a, b = parse_number(PI_DIGITS), parse_number(E_DIGITS)
    print(f"Naive:     {formatter.format(multiply_naive(a, b))}")
    print(f"Karatsuba: {formatter.format(multiply_karatsuba(a, b))}")

    print("\n=== Random 2000-3000 digit multiplication ===")
    a, b = random_bigint(2000, 3000, rng), random_bigint(2000, 3000, rng)
    print(f"a has {a.length} limbs, b has {b.length} limbs")
    same = multiply_naive(a, b) == multiply_karatsuba(a, b)
    print(f"Naive and Karatsuba agree: {same}")


def show_timings(rng: random.Random):
    fixed = time_multiplication(parse_number(PI_DIGITS), parse_number(E_DIGITS))
    print("\n=== Multiplication timings (fixed) ===")
    print(fixed.format())
    rand = time_multiplication(random_bigint(2000, 3000, rng), random_bigint(2000, 3000, rng))
    print(f"\n=== Multiplication timings (random, {rand.digits} digits) ===")
    print(rand.format())


def show_karatsuba_edge_cases(formatter: Formatter, rng: random.Random):
    print("\n--- Karatsuba edge cases ---")
    x = parse_number("987654321")
    print(f"a x 0: {formatter.format(multiply_karatsuba(x, BigInt.zero()))}")
    print(f"a x 1: {formatter.format(multiply_karatsuba(x, BigInt.one()))}")
    print(f"single digit: {formatter.format(multiply_karatsuba(parse_number('7'), parse_number('8')))}")
    for label, a, b in (("1000 digits", random_bigint(1000, 1000, rng), random_bigint(1000, 1000, rng)),
                        ("mismatched sizes", random_bigint(100, 100, rng), random_bigint(2000, 2000, rng))):
        ok = multiply_karatsuba(a, b) == multiply_naive(a, b)
        print(f"{label}: {'OK' if ok else 'MISMATCH'}")


def show_division(formatter: Formatter):
    print("\nLong division")
    a = parse_number("123456789012345678901234567890")
    b = parse_number("1234567890")
    q, r = divide(a, b)
    print(f"Dividend:  {formatter.format(a)}")
    print(f"Divisor:   {formatter.format(b)}")
    print(f"Quotient:  {formatter.format(q)}")
    print(f"Remainder: {formatter.format(r)}")


def run_demo(rng: random.Random):
    formatter = Formatter()
    show_limbs(formatter)
    show_comparisons()
    show_additions(formatter)
    show_products(formatter, rng)
    show_timings(rng)
    show_karatsuba_edge_cases(formatter, rng)
    show_division(formatter)
