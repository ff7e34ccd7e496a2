from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import FixerConfig
from .logging_utils import LEVEL_NAMES, configure_logging
from .pipeline import fix_cdl_text


logger = logging.getLogger(__name__)

USAGE_EXAMPLES = """\
examples:
  cdl-fixer < input.cdl > output.cdl
  cdl-fixer --input input.cdl --output output.cdl
  cdl-fixer --input input.cdl --output output.cdl --soc-module example.soc_mod
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cdl-fixer",
        description="Fix smic180bcd CDL netlists for ic618 spiceIn",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    basic = parser.add_argument_group("Basic options")
    basic.add_argument("-i", "--input", type=Path, help="Input CDL file (default: stdin).")
    basic.add_argument("-o", "--output", type=Path, help="Output CDL file (default: stdout).")

    extra = parser.add_argument_group("Additional options")
    extra.add_argument("--no-param", action="store_true", help="Disable section marker injection.")
    extra.add_argument("--no-case-conversion", action="store_true", help="Disable parameter case conversion.")
    extra.add_argument("--no-calc-data", action="store_true", help="Disable fw/w/l calculation.")
    extra.add_argument("-m", "--soc-module", type=Path, help="Module description file for *.PININFO lines.")
    extra.add_argument(
        "--log-level",
        type=str.upper,
        choices=LEVEL_NAMES,
        help="Logging level (default: $LOG_LEVEL or INFO).",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> FixerConfig:
    return FixerConfig(
        param=not args.no_param,
        case_conversion=not args.no_case_conversion,
        calc_data=not args.no_calc_data,
        soc_module=args.soc_module,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    cfg = config_from_args(args)

    if args.input is not None:
        try:
            netlist_text = args.input.read_text(encoding="utf-8", errors="surrogateescape")
        except OSError as exc:
            logger.error("Failed to open file: %s (%s)", args.input, exc)
            return 1
    else:
        netlist_text = sys.stdin.read()

    fixed_text = fix_cdl_text(netlist_text, cfg)

    if args.output is not None:
        try:
            args.output.write_text(fixed_text, encoding="utf-8", errors="surrogateescape")
        except OSError as exc:
            logger.error("Failed to open file: %s (%s)", args.output, exc)
            return 1
    else:
        sys.stdout.write(fixed_text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
