from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class Prefix:
    name: str
    symbol: str
    scale_factor: float

    def __post_init__(self):
        if not self.scale_factor > 0:
            raise ValueError(f"Prefix scale factor must be positive, got {self.scale_factor!r}")


class PrefixTable:
    """Ordered, read-only catalog of metric prefixes keyed by symbol.

    Iteration order is the construction order. Parsing and auto-scaling both
    rely on it: larger magnitudes come first so that a symbol is always tried
    before any shorter symbol contained in it ("da" before "d" and "a").
    """

    def __init__(self, prefixes: Iterable[Prefix]):
        ordered = tuple(prefixes)
        by_symbol = {}
        for prefix in ordered:
            if prefix.symbol in by_symbol:
                raise ValueError(f"Duplicate prefix symbol {prefix.symbol!r}")
            by_symbol[prefix.symbol] = prefix
        self._prefixes: Tuple[Prefix, ...] = ordered
        self._by_symbol = MappingProxyType(by_symbol)

    def __iter__(self) -> Iterator[Prefix]:
        return iter(self._prefixes)

    def __len__(self) -> int:
        return len(self._prefixes)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._by_symbol

    def __getitem__(self, symbol: str) -> Prefix:
        return self._by_symbol[symbol]

    def get(self, symbol: str) -> Optional[Prefix]:
        return self._by_symbol.get(symbol)

    def by_name(self, name: str) -> Optional[Prefix]:
        for prefix in self._prefixes:
            if prefix.name == name:
                return prefix
        return None

    def supports_symbol(self, symbol: str) -> bool:
        return symbol in self._by_symbol

    def supports_name(self, name: str) -> bool:
        return self.by_name(name) is not None

    def symbols(self) -> Tuple[str, ...]:
        return tuple(prefix.symbol for prefix in self._prefixes)

    def names(self) -> Tuple[str, ...]:
        return tuple(prefix.name for prefix in self._prefixes)


PREFIXES = PrefixTable(
    [
        Prefix("yotta", "Y", 1e24),
        Prefix("zetta", "Z", 1e21),
        Prefix("exa", "E", 1e18),
        Prefix("peta", "P", 1e15),
        Prefix("tera", "T", 1e12),
        Prefix("giga", "G", 1e9),
        Prefix("mega", "M", 1e6),
        Prefix("kilo", "k", 1e3),
        Prefix("hecto", "h", 1e2),
        Prefix("deca", "da", 1e1),
        Prefix("", "", 1.0),
        Prefix("deci", "d", 1e-1),
        Prefix("centi", "c", 1e-2),
        Prefix("milli", "m", 1e-3),
        Prefix("micro", "μ", 1e-6),
        Prefix("nano", "n", 1e-9),
        Prefix("pico", "p", 1e-12),
        Prefix("femto", "f", 1e-15),
        Prefix("atto", "a", 1e-18),
        Prefix("zepto", "z", 1e-21),
        Prefix("yocto", "y", 1e-24),
    ]
)


def prefix_labels(unit: str, table: PrefixTable = PREFIXES) -> List[str]:
    return [f"{prefix.symbol}{unit}" for prefix in table]
