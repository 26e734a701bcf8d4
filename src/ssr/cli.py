"""Command line interface: print the constant term of each share document."""

from __future__ import annotations

import argparse
import logging
import sys

from ssr.decoder import ShareDecoder
from ssr.digits import to_text
from ssr.errors import DuplicateAbscissaError, NonIntegralSecretError, ReconstructionError
from ssr.interpolation import Interpolator, Selection
from ssr.loader import load_document

logger = logging.getLogger(__name__)

DEFAULT_FILES = ["testcase1.json", "testcase2.json"]

_SELECTIONS = {
    "ascending": Selection.ASCENDING,
    "input": Selection.INPUT_ORDER,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ssr",
        description="Recover Shamir secrets from JSON share documents",
    )
    parser.add_argument(
        "files",
        nargs="*",
        default=DEFAULT_FILES,
        help="share documents (default: testcase1.json testcase2.json)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="treat any malformed or undecodable share as fatal",
    )
    parser.add_argument(
        "--selection",
        choices=sorted(_SELECTIONS),
        default="ascending",
        help="which k points to use when more are available",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="errors only")
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args)

    decoder = ShareDecoder(strict=args.strict)
    interpolator = Interpolator(_SELECTIONS[args.selection])

    failures = 0
    for path in args.files:
        try:
            document = load_document(path, decoder=decoder)
            secret = document.solve(interpolator)
        except (DuplicateAbscissaError, NonIntegralSecretError) as exc:
            print(f"Math error: {exc}", file=sys.stderr)
            failures += 1
            continue
        except ReconstructionError as exc:
            print(f"Input error: {exc}", file=sys.stderr)
            failures += 1
            continue
        logger.info("%s: recovered secret from k=%d points", document.name, document.k)
        print(f"Constant term for {document.name}: {to_text(secret)}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
