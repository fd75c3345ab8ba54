#!/usr/bin/env python3
"""
Evaluate the univariate Lagrange extension of a message at field points.

The message symbols are the values of the polynomial at 0, 1, ..., n-1;
each --point is reduced modulo the field order (so -1 means p - 1).

Usage:
    python evaluate_extension.py \
        --message "AB" \
        --point 2 --point 12345 \
        [--field goldilocks|pallas] \
        [--encoding ascii|codepoint] \
        [--check]
"""

import argparse
import sys

from extensions import (
    ExtensionConfig,
    LagrangeExtensionError,
    UnivariateExtension,
    evaluate_lagrange_naive,
)
from primitives.encoding import ENCODINGS, UnmappedSymbolError
from primitives.field import DEFAULT_FIELD_NAME, FIELD_NAMES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Evaluate the univariate Lagrange extension of a message'
    )
    parser.add_argument(
        '--message',
        type=str,
        required=True,
        help='Message whose symbol codes are the values at 0..n-1'
    )
    parser.add_argument(
        '--point',
        type=int,
        action='append',
        required=True,
        help='Evaluation point as an integer (repeatable)'
    )
    parser.add_argument(
        '--field',
        choices=FIELD_NAMES,
        default=DEFAULT_FIELD_NAME,
        help=f'Prime field (default: {DEFAULT_FIELD_NAME})'
    )
    parser.add_argument(
        '--encoding',
        choices=ENCODINGS,
        default='ascii',
        help='Symbol encoding for the message (default: ascii)'
    )
    parser.add_argument(
        '--check',
        action='store_true',
        help='Cross-check every result against the O(n^2) reference evaluation'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = ExtensionConfig(field_name=args.field, encoding=args.encoding)
    extension = UnivariateExtension(config)

    try:
        coefficients = extension.encode(args.message)
        points = [extension.point(p) for p in args.point]
        values = [extension.evaluate_encoded(coefficients, r) for r in points]
    except (LagrangeExtensionError, UnmappedSymbolError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    mismatches = 0
    for r, value in zip(points, values):
        print(f"P({int(r)}) = {int(value)}")
        if args.check:
            expected = evaluate_lagrange_naive(coefficients, r)
            if int(expected) != int(value):
                print(f"ERROR: reference evaluation at {int(r)} gives {int(expected)}", file=sys.stderr)
                mismatches += 1

    if mismatches:
        print(f"{mismatches} of {len(args.point)} evaluations disagree with the reference", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
