import argparse
import logging
import re
import sys
from typing import List, Optional

import metric_arithmetic
from metric_config import MetricConfig
from metric_errors import MetricError
from metric_format import format_number
from metric_logging import configure_logging
from metric_parser import parse
from metric_scaler import auto_scale, scale
from si_prefix import PREFIXES, prefix_labels

logger = logging.getLogger(__name__)

_NEGATIVE = re.compile(r"^-[\d.]")

ARITHMETIC = {
    "add": metric_arithmetic.add,
    "sub": metric_arithmetic.subtract,
    "mul": metric_arithmetic.multiply,
    "div": metric_arithmetic.divide,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metric",
        description="Parse, scale and combine values written with metric prefixes.",
    )
    parser.add_argument("-u", "--unit", default=None, help="base unit, e.g. 'm' or 'W'")
    parser.add_argument("--threshold", type=float, default=None, help="auto-scale threshold")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("parse", help="print the raw value of VALUE")
    p.add_argument("value")

    p = sub.add_parser("compare", help="print -1 if A > B, 0 if equal, 1 if A < B")
    p.add_argument("a")
    p.add_argument("b")

    for name in ARITHMETIC:
        p = sub.add_parser(name, help=f"{name} two values")
        p.add_argument("a")
        p.add_argument("b")

    p = sub.add_parser("autoscale", help="rewrite VALUE with the most readable prefix")
    p.add_argument("value")

    p = sub.add_parser("scale", help="rewrite VALUE with PREFIX (base unit if omitted)")
    p.add_argument("value")
    p.add_argument("prefix", nargs="?", default="")

    sub.add_parser("prefixes", help="list known prefixes, spelled with the base unit if one is set")
    return parser


def _protect_negative_values(argv: List[str]) -> List[str]:
    # argparse reads "-3kV" as an option; end option parsing before the first
    # signed value that follows the subcommand.
    argv = list(argv)
    if "--" in argv:
        return argv
    commands = set(ARITHMETIC) | {"parse", "compare", "autoscale", "scale", "prefixes"}
    for i, token in enumerate(argv):
        if token in commands:
            for j in range(i + 1, len(argv)):
                if _NEGATIVE.match(argv[j]):
                    return argv[:j] + ["--"] + argv[j:]
            break
    return argv


def _value(text: str):
    # Bare numbers are raw values; anything else goes through the parser.
    try:
        return float(text)
    except ValueError:
        return text


def _execute(args: argparse.Namespace, config: MetricConfig) -> str:
    unit = config.base_unit
    if args.command == "parse":
        return format_number(parse(args.value, unit))
    if args.command == "compare":
        return str(metric_arithmetic.compare(args.a, args.b, unit))
    if args.command in ARITHMETIC:
        return format_number(ARITHMETIC[args.command](args.a, args.b, unit))
    if args.command == "autoscale":
        return auto_scale(_value(args.value), unit, threshold=config.threshold)
    if args.command == "scale":
        return scale(_value(args.value), unit, args.prefix)
    return "\n".join(
        f"{label}\t{prefix.name}\t{prefix.scale_factor:g}"
        for label, prefix in zip(prefix_labels(unit), PREFIXES)
    )


def run(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(_protect_negative_values(argv))
    config = MetricConfig.from_env().with_overrides(
        base_unit=args.unit,
        threshold=args.threshold,
        log_level="DEBUG" if args.verbose else None,
    )
    configure_logging(config.log_level)

    try:
        output = _execute(args, config)
    except MetricError as exc:
        logger.debug("Command %s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(run())
