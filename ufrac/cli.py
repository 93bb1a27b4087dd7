"""Print a few fraction computations, configured by flags or a TOML parfile."""

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

from .fraction import Fraction

logger = logging.getLogger(__name__)


@dataclass
class DemoParams:
    numerator: int = 1
    denominator: int = 2
    scalar: float = 0.12
    other_numerator: Optional[int] = None
    other_denominator: Optional[int] = None


def load_parfile(path: str) -> Dict[str, Any]:
    parfile = Path(path).expanduser().resolve()
    if not parfile.exists():
        raise FileNotFoundError(f"Parfile not found: {parfile}")
    with parfile.open("rb") as pf:
        params = tomllib.load(pf)

    known = {field.name for field in fields(DemoParams)}
    unknown = sorted(set(params) - known)
    if unknown:
        raise ValueError(f"Unknown parfile keys in {parfile}: {', '.join(unknown)}")
    logger.debug("loaded %s: %s", parfile, params)
    return params


def resolve_params(args: argparse.Namespace) -> DemoParams:
    values: Dict[str, Any] = {}
    if args.parfile is not None:
        values.update(load_parfile(args.parfile))
    for field in fields(DemoParams):
        flag_value = getattr(args, field.name)
        if flag_value is not None:
            values[field.name] = flag_value

    if ("other_numerator" in values) != ("other_denominator" in values):
        raise ValueError("other_numerator and other_denominator must be given together")
    return DemoParams(**values)


def run(params: DemoParams) -> List[str]:
    fraction = Fraction(params.numerator, params.denominator)
    lines = [f"{fraction} + {params.scalar} = {fraction.add_scalar(params.scalar)}"]

    if params.other_numerator is not None:
        other = Fraction(params.other_numerator, params.other_denominator)
        lines.append(f"{fraction} + {other} = {fraction.add_fraction(other)}")
        lines.append(f"{fraction} * {other} = {fraction.multiply(other)}")
        lines.append(f"{fraction} == {other}: {fraction.equals_fraction(other)}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ufrac-demo",
        description="Print a few computations on unsigned 64-bit fractions.",
    )
    parser.add_argument("--parfile", dest="parfile", help="TOML file with default parameters")
    parser.add_argument("--numerator", type=int, help="Numerator of the fraction (default 1)")
    parser.add_argument("--denominator", type=int, help="Denominator of the fraction (default 2)")
    parser.add_argument("--scalar", type=float, help="Float added to the fraction (default 0.12)")
    parser.add_argument("--other-numerator", dest="other_numerator", type=int,
                        help="Numerator of a second fraction")
    parser.add_argument("--other-denominator", dest="other_denominator", type=int,
                        help="Denominator of a second fraction")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        params = resolve_params(args)
        lines = run(params)
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
