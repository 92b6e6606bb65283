"""Comparison and arithmetic on prefixed strings that share a base unit."""
import numpy as np

from metric_parser import parse


def compare(a: str, b: str, base_unit: str) -> int:
    """Three-way comparison with inverted polarity.

    Returns -1 if a > b, 0 if a == b and 1 if a < b.
    """
    x = parse(a, base_unit)
    y = parse(b, base_unit)
    if x > y:
        return -1
    if x < y:
        return 1
    return 0


def add(a: str, b: str, base_unit: str) -> float:
    return parse(a, base_unit) + parse(b, base_unit)


def subtract(a: str, b: str, base_unit: str) -> float:
    return parse(a, base_unit) - parse(b, base_unit)


def multiply(a: str, b: str, base_unit: str) -> float:
    return parse(a, base_unit) * parse(b, base_unit)


def divide(a: str, b: str, base_unit: str) -> float:
    """Quotient of a and b. Division by zero gives inf or nan, not an error."""
    x = np.float64(parse(a, base_unit))
    y = np.float64(parse(b, base_unit))
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(x, y))
