#!/usr/bin/env python3
"""Pick random, non-repeating winners from a participants file.

Ejemplo:
  random-winners participants.txt 3
  random-winners entries.csv 2 --column nombre --seed 42

"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from winners.core.errors import DrawError, EmptyParticipantList, InsufficientParticipants, InvalidWinnerCount, UsageError
from winners.core.logger import setup_logging
from winners.core.schemas import DrawResult
from winners.core.settings import settings
from winners.services.loader import load_participants
from winners.services.sampler import make_rng, pick_winners
from winners.services.utils import format_report

logger = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    # errores de argumentos -> UsageError
    def error(self, message: str):
        raise UsageError(message)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = _Parser(
        prog=prog,
        usage="%(prog)s <input_file> <number_of_winners> [options]",
        description="Randomly select winners from a list of participants.",
        epilog="Example:\n  %(prog)s participants.txt 3",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input_file", help="Path to text file with one nickname per line")
    parser.add_argument("number_of_winners", help="Number of random winners to select")
    parser.add_argument("--seed", type=int, default=None, help="Fixed seed for a reproducible draw")
    parser.add_argument("--column", default=None, help="Read names from this CSV column instead of plain lines")
    parser.add_argument("--sep", default=settings.csv_sep, help="CSV delimiter (with --column)")
    parser.add_argument("--encoding", default=settings.encoding, help="Input file encoding")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log loaded participants and the seed to stderr")
    return parser


def _parse_count(raw: str) -> int:
    # solo digitos ASCII: sin signo, espacios ni "_"
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidWinnerCount(raw)
    n = int(raw)
    if n <= 0:
        raise InvalidWinnerCount(n)
    return n


def run_draw(args: argparse.Namespace) -> DrawResult:
    n = _parse_count(args.number_of_winners)

    column = args.column if args.column is not None else settings.csv_column
    participants: List[str] = load_participants(
        args.input_file, column=column or None, sep=args.sep, encoding=args.encoding
    )
    if not participants:
        raise EmptyParticipantList(args.input_file)
    if n > len(participants):
        raise InsufficientParticipants(n, len(participants))

    logger.debug(f"Loaded {len(participants)} participants:")
    for i, name in enumerate(participants):
        logger.debug(f"  [{i}] '{name}'")

    rng, seed = make_rng(args.seed)
    logger.debug(f"Seed: {seed}")

    winners = pick_winners(participants, n, rng, source=args.input_file)
    return DrawResult(participants=len(participants), seed=seed, winners=winners)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError:
        print(parser.format_help(), end="")
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        result = run_draw(args)
    except InsufficientParticipants as e:
        print(f"Error: {e}", file=sys.stderr)
        print(e.hint, file=sys.stderr)
        return 1
    except DrawError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_report(result), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
