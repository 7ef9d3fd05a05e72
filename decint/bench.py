import logging
import random
import time
from dataclasses import dataclass
from typing import Optional

from decint.multiplicative import multiply_karatsuba, multiply_naive
from decint.number import BigInt
from decint.parser import parse_number

logger = logging.getLogger(__name__)


@dataclass
class BenchResult:
    digits: int
    naive_seconds: float
    karatsuba_seconds: float
    agree: bool

    def format(self) -> str:
        return f"Naive:     {self.naive_seconds:.6f} s\nKaratsuba: {self.karatsuba_seconds:.6f} s"


def random_bigint(min_digits: int, max_digits: int, rng: random.Random) -> BigInt:
    """Positive value with a nonzero leading digit and between min_digits and max_digits digits."""
    if min_digits < 1 or max_digits < min_digits:
        raise ValueError(f"Bad digit range: {min_digits}..{max_digits}")
    length = rng.randint(min_digits, max_digits)
    digits = [str(rng.randint(1, 9))] + [str(rng.randint(0, 9)) for _ in range(length - 1)]
    return parse_number(''.join(digits))


def time_multiplication(a: BigInt, b: BigInt) -> BenchResult:
    start = time.perf_counter()
    naive = multiply_naive(a, b)
    naive_seconds = time.perf_counter() - start

    start = time.perf_counter()
    karatsuba = multiply_karatsuba(a, b)
    karatsuba_seconds = time.perf_counter() - start

    agree = naive == karatsuba
    if not agree:
        logger.warning("Naive and Karatsuba products differ for %d x %d limbs", a.length, b.length)
    logger.debug("Multiplied %d x %d limbs: naive %.6fs, karatsuba %.6fs",
                 a.length, b.length, naive_seconds, karatsuba_seconds)
    return BenchResult(len(str(a)), naive_seconds, karatsuba_seconds, agree)


def run_benchmark(digits: int, seed: Optional[int] = None) -> BenchResult:
    rng = random.Random(seed)
    logger.debug("Generating two %d digit operands (seed=%s)", digits, seed)
    a = random_bigint(digits, digits, rng)
    b = random_bigint(digits, digits, rng)
    return time_multiplication(a, b)
