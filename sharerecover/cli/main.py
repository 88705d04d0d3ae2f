#!/usr/bin/env python3
"""Recover a secret from a share document.

Usage:
    sharerecover shares.json
    python -m sharerecover.cli.main - < shares.json

The script:
1. Reads the share document (a path, or ``-`` / nothing for stdin).
2. Decodes every share value from its stated base.
3. Selects k shares and interpolates the polynomial at x = 0.
4. Prints the secret on stdout.

Any failure prints ``Error: <kind>: <message>`` on stderr and exits 1
without printing a secret.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from sharerecover.config import DEFAULT_SELECTION, LOG_LEVEL, MAX_VALUE_BITS, STRICT_TOTAL
from sharerecover.errors import ShareRecoveryError
from sharerecover.io.document import decode_text, load_document, parse_document
from sharerecover.recovery.reconstructor import SELECTION_POLICIES, reconstruct
from sharerecover.store.builder import build

logger = logging.getLogger("sharerecover")


def _bit_limit(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or positive, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sharerecover",
        description="Reconstruct a threshold-shared secret from radix-encoded shares.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="share document (JSON); '-' or omitted reads stdin",
    )
    parser.add_argument(
        "--selection",
        choices=SELECTION_POLICIES,
        default=DEFAULT_SELECTION,
        help="which k shares to interpolate (default: %(default)s)",
    )
    parser.add_argument(
        "--max-bits",
        type=_bit_limit,
        default=MAX_VALUE_BITS,
        help="largest decoded value in bits, 0 for unlimited (default: %(default)s)",
    )
    parser.add_argument(
        "--strict-total",
        action="store_true",
        default=STRICT_TOTAL,
        help="fail when keys.n differs from the number of shares",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=LOG_LEVEL,
        help="logging level written to stderr (default: %(default)s)",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Recover and return the secret described by *args*."""
    if args.path == "-":
        doc = parse_document(decode_text(sys.stdin.buffer.read(), "stdin"))
    else:
        doc = load_document(args.path)

    share_set = build(
        doc.records,
        doc.threshold,
        total=doc.total,
        max_bits=args.max_bits,
        strict_total=args.strict_total,
    )
    return reconstruct(share_set, selection=args.selection)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        secret = run(args)
    except ShareRecoveryError as exc:
        logger.debug("reconstruction failed", exc_info=True)
        print(f"Error: {exc.kind}: {exc}", file=sys.stderr)
        return 1

    print(secret)
    return 0


if __name__ == "__main__":
    sys.exit(main())
