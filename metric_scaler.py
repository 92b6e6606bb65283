import logging
from typing import Optional, Union

from metric_errors import InvalidPrefixError
from metric_format import format_number
from metric_parser import parse
from si_prefix import PREFIXES, Prefix, PrefixTable

logger = logging.getLogger(__name__)

# A prefix is only used once the value is more than twice its scale factor,
# so 2500 W becomes "2.5kW" and 1500 W becomes "15hW".
AUTO_SCALE_THRESHOLD = 2.0

Value = Union[str, float]


def _raw(value: Value, base_unit: str, table: PrefixTable) -> float:
    if isinstance(value, str):
        return parse(value, base_unit, table)
    return float(value)


def auto_scale_prefix(
    raw: float,
    threshold: float = AUTO_SCALE_THRESHOLD,
    table: PrefixTable = PREFIXES,
) -> Optional[Prefix]:
    magnitude = abs(raw)
    for prefix in table:
        if magnitude > threshold * prefix.scale_factor:
            return prefix
    return None


def auto_scale(
    value: Value,
    base_unit: str,
    threshold: float = AUTO_SCALE_THRESHOLD,
    table: PrefixTable = PREFIXES,
) -> str:
    """Format ``value`` with the largest prefix it exceeds by ``threshold``.

    The sign is kept and selection uses the magnitude, so -2500 W becomes
    "-2.5kW". Values too small for any prefix are formatted unprefixed.
    """
    raw = _raw(value, base_unit, table)
    prefix = auto_scale_prefix(raw, threshold, table)
    if prefix is None:
        logger.debug("No prefix exceeds %r, formatting unprefixed", raw)
        return format_number(raw) + base_unit
    logger.debug("Auto-scaled %r to prefix %r", raw, prefix.symbol)
    return format_number(raw / prefix.scale_factor) + prefix.symbol + base_unit


def scale(
    value: Value,
    base_unit: str,
    target_prefix: str = "",
    table: PrefixTable = PREFIXES,
) -> str:
    """Format ``value`` with an explicit prefix. ``""`` means the base unit."""
    raw = _raw(value, base_unit, table)
    prefix = table.get(target_prefix)
    if prefix is None:
        raise InvalidPrefixError(target_prefix)
    return format_number(raw / prefix.scale_factor) + prefix.symbol + base_unit
