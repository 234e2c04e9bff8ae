"""
STARK Algebra - Main Entry Point

Prints a short tour of the field and polynomial layers.

Run with:
    python -m stark_algebra.main
    stark-demo --demo polynomial --verbose
"""

import argparse
import logging
import sys

from .field import create_stark_field
from .polynomial import Polynomial

DEMOS = ("sum", "field", "polynomial", "all")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Route stark_algebra log records to stderr with a compact format."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Prime-field and polynomial arithmetic demo."
    )
    p.add_argument(
        "--demo",
        "-d",
        choices=DEMOS,
        default="all",
        help="Which demo to run. Default: all",
    )
    p.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging from the library.",
    )
    return p


def print_section(title: str):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def run_sum_demo(field):
    """The classic smoke test: add two small elements."""
    el1 = field.new_element(10)
    el2 = field.new_element(12)
    print(f"sum is {el1 + el2!r}")


def run_field_demo(field):
    """Reduction, inversion and the 3 * 2^30 + 1 identity."""
    print_section("FIELD ARITHMETIC")
    print(f"\nField: Z_{field.modulus} (generator {field.generator_value})")

    a = field.new_element(-317544001)
    print(f"\nnew_element(-317544001) = {a.value}")

    b = field.new_element(10)
    b_inv = b.inverse()
    print(f"10^(-1) = {b_inv.value}")
    print(f"10 * 10^(-1) = {(b * b_inv).value} (should be 1)")

    identity = field.new_element(2) ** 30 * 3 + 1
    print(f"2^30 * 3 + 1 = {identity.value} (p itself, so 0)")


def run_polynomial_demo(field):
    """Ring operations, division, composition and interpolation."""
    print_section("POLYNOMIAL ARITHMETIC")

    p = Polynomial.from_values([1, 2, 3], field)
    q = Polynomial.from_values([2, 3, 4, 5, 6], field)
    print(f"\np(x) = {p}")
    print(f"q(x) = {q}")
    print(f"p + q = {p + q}")
    print(f"p * q = {p * q}")

    quotient, remainder = divmod(q, p)
    print(f"\nq / p: quotient = {quotient}")
    print(f"       remainder = {remainder}")
    print(f"quotient * p + remainder == q: {quotient * p + remainder == q}")

    x = Polynomial.identity(field)
    shifted = p.compose(x + Polynomial.constant(1, field))
    print(f"\np(x + 1) = {shifted}")

    xs = field.new_elements([1, 2, 3, 4])
    ys = p.evaluate_many(xs)
    recovered = Polynomial.interpolate(xs, ys)
    print(f"\nSamples of p at {[e.value for e in xs]}: {[e.value for e in ys]}")
    print(f"Interpolated: {recovered}")
    print(f"Recovered p: {recovered == p}")


def main(argv=None) -> int:
    """Main entry point."""
    argv = argv if argv is not None else sys.argv[1:]
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.verbose)

    field = create_stark_field()

    if args.demo in ("sum", "all"):
        run_sum_demo(field)
    if args.demo in ("field", "all"):
        run_field_demo(field)
    if args.demo in ("polynomial", "all"):
        run_polynomial_demo(field)

    return 0


if __name__ == "__main__":
    sys.exit(main())
