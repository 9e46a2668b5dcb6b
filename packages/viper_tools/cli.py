from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_PLATFORM, PLATFORMS, GenerateConfig
from .errors import GenerateError
from .generator import ModuleGenerator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="viper-tools",
        description="Command-line tool for viper modules.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a module of viper components at a given location.")
    gen.add_argument("name", help="The name of the module to generate.")
    gen.add_argument("output", help="The output path of the module.")
    gen.add_argument(
        "--platform",
        choices=sorted(PLATFORMS),
        default=DEFAULT_PLATFORM,
        help=f"UI toolkit of the generated view (default: {DEFAULT_PLATFORM}).",
    )
    gen.add_argument(
        "--exclude-directory",
        action="store_true",
        help="Don't create a new directory for generated files.",
    )
    gen.add_argument("-v", "--verbose", action="store_true", help="Show extra logging for debugging purposes.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(format="%(message)s")
    logging.getLogger("viper_tools").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    cfg = GenerateConfig(
        name=args.name,
        output=Path(args.output),
        platform=args.platform,
        exclude_directory=args.exclude_directory,
    )

    try:
        ModuleGenerator().generate(cfg)
    except GenerateError as exc:
        logger.debug("Generation failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f'Finished generating module "{cfg.module_name}" at "{cfg.destination}".')
    return 0


if __name__ == "__main__":
    sys.exit(main())
