import numpy as np


def format_number(value: float) -> str:
    """Shortest round-tripping positional form of ``value``.

    Never uses an exponent, so the output can always be read back by the
    parser. Integral values drop the trailing ``.0`` (``1500.0 -> "1500"``).
    """
    return np.format_float_positional(float(value), unique=True, trim="-")
