import logging
import random
import sys

from decint.additive import add, subtract
from decint.bench import run_benchmark
from decint.demo import run_demo
from decint.division import divide
from decint.errors import BigIntError
from decint.formatter import Formatter
from decint.multiplicative import multiply_karatsuba
from decint.parser import parse_number

logger = logging.getLogger(__name__)

OPERATORS = ['+', '-', '*', '/', '%']


def bench(digits: int, seed=None):
    if digits < 1:
        raise ValueError(f"Digit count must be positive, got {digits}")
    result = run_benchmark(digits, seed)
    print(result.format())


def calc(left: str, op: str, right: str):
    formatter = Formatter()
    a = parse_number(left)
    b = parse_number(right)
    logger.debug("Evaluating %d limbs %s %d limbs", a.length, op, b.length)
    if op == '+':
        print(formatter.format(add(a, b)))
    elif op == '-':
        print(formatter.format(subtract(a, b)))
    elif op == '*':
        print(formatter.format(multiply_karatsuba(a, b)))
    elif op == '/':
        q, r = divide(a, b)
        print(f"Quotient:  {formatter.format(q)}")
        print(f"Remainder: {formatter.format(r)}")
    elif op == '%':
        print(formatter.format(divide(a, b)[1]))


def limbs(value: str):
    formatter = Formatter()
    number = parse_number(value)
    print(formatter.format(number))
    print(formatter.format_limbs(number))


def main(argv=None) -> int:
    import argparse

    arg_parser = argparse.ArgumentParser(description="Decimal-block big integer toolkit")
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = arg_parser.add_subparsers(dest="command", required=True)

    bench_parser = subparsers.add_parser("bench", help="Time naive and Karatsuba multiplication of two N digit numbers")
    bench_parser.add_argument("digits", type=int, help="Number of decimal digits per operand")
    bench_parser.add_argument("--seed", type=int, default=None, help="Seed for operand generation")

    demo_parser = subparsers.add_parser("demo", help="Print the arithmetic showcase")
    demo_parser.add_argument("--seed", type=int, default=None, help="Seed for random operands")

    calc_parser = subparsers.add_parser("calc", help="Evaluate a single binary operation")
    calc_parser.add_argument("left", help="Left operand")
    calc_parser.add_argument("op", choices=OPERATORS, help="Operator")
    calc_parser.add_argument("right", help="Right operand")

    limbs_parser = subparsers.add_parser("limbs", help="Show the limbs of a number")
    limbs_parser.add_argument("value", help="Decimal integer")

    args = arg_parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="[%(levelname)s] %(name)s: %(message)s")

    try:
        if args.command == "bench":
            bench(args.digits, args.seed)
        elif args.command == "demo":
            run_demo(random.Random(args.seed))
        elif args.command == "calc":
            calc(args.left, args.op, args.right)
        elif args.command == "limbs":
            limbs(args.value)
    except (BigIntError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
