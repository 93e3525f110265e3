"""Integer four-function calculator and rectangle area."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum


class Operation(IntEnum):
    """Menu choices of the calculator."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4


_LABELS = {
    Operation.ADD: "the total sum",
    Operation.SUBTRACT: "the subtraction value",
    Operation.MULTIPLY: "the multiple value is",
    Operation.DIVIDE: "the divided value",
}


def calculate(operation: Operation | int, a: int, b: int) -> int:
    """Apply ``operation`` to two integers; division truncates toward zero."""
    operation = Operation(operation)
    if operation is Operation.ADD:
        return a + b
    if operation is Operation.SUBTRACT:
        return a - b
    if operation is Operation.MULTIPLY:
        return a * b
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Rectangle:
    """A rectangle given by two side lengths."""

    width: int
    height: int

    def area(self) -> int:
        return self.width * self.height


def main(argv: Sequence[str] | None = None) -> int:
    """Run one calculation from the command line."""
    parser = argparse.ArgumentParser(
        prog="calculator",
        description="1 add, 2 subtract, 3 multiply, 4 divide",
    )
    parser.add_argument("choice", type=int, help="operation number")
    parser.add_argument("a", type=int, help="first number")
    parser.add_argument("b", type=int, help="second number")
    args = parser.parse_args(argv)

    try:
        operation = Operation(args.choice)
    except ValueError:
        print("kindly select number by given instruction", file=sys.stderr)
        print("ERROR", file=sys.stderr)
        return 1
    try:
        result = calculate(operation, args.a, args.b)
    except ZeroDivisionError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"{_LABELS[operation]} = {result}")
    return 0