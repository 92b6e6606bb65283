import logging
import re
from typing import Iterable

import numpy as np

from metric_errors import ParseError
from si_prefix import PREFIXES, PrefixTable

logger = logging.getLogger(__name__)

_NUMERAL = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")
# Micro sign (U+00B5) is accepted as an alias for Greek mu (U+03BC).
_MICRO_ALIASES = str.maketrans({"µ": "μ"})


def parse(value: str, base_unit: str, table: PrefixTable = PREFIXES) -> float:
    """Return the raw numeric value of a prefixed string such as ``"10km"``.

    Every occurrence of ``base_unit`` is removed first, then the first prefix
    symbol (in table order) found anywhere in what is left. Whatever remains
    must be a plain decimal numeral.
    """
    remainder = value.translate(_MICRO_ALIASES)
    if base_unit:
        remainder = remainder.replace(base_unit, "")

    multiplier = 1.0
    for prefix in table:
        if not prefix.symbol.strip():
            continue
        if prefix.symbol in remainder:
            remainder = remainder.replace(prefix.symbol, "")
            multiplier = prefix.scale_factor
            logger.debug("Matched prefix %r (%s) in %r", prefix.symbol, prefix.name, value)
            break

    if not _NUMERAL.match(remainder):
        raise ParseError(value, base_unit)

    return float(remainder) * multiplier


def parse_many(values: Iterable[str], base_unit: str, table: PrefixTable = PREFIXES) -> np.ndarray:
    return np.array([parse(v, base_unit, table) for v in values], dtype=float)
