#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Word Finder - lists dictionary words that can be built from a set of letters
"""
import argparse
import logging
import sys
from typing import List, Optional

from constants import DEFAULT_MIN_LENGTH, DEFAULT_STRATEGY, EMPTY_WORD_LABEL, RESULT_COLUMNS, STRATEGIES
from word_finder import WordFinder

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-finder",
        description="Find every dictionary word that can be spelled with the given letters.",
    )
    parser.add_argument("letters", help="available letters, each usable as many times as it appears")
    parser.add_argument("-d", "--dictionary", help="word list file, one word per line (default: embedded basic dictionary)")
    parser.add_argument("-m", "--min-length", type=int, default=DEFAULT_MIN_LENGTH, help="minimum word length")
    parser.add_argument("--strategy", choices=STRATEGIES, default=DEFAULT_STRATEGY, help="letter bookkeeping during the search")
    parser.add_argument("--upper", action="store_true", help="compare letters and words in uppercase")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def format_results(letters: str, words: List[str], min_length: int) -> str:
    if not words:
        return (
            "No words found with these letters.\n\n"
            f"Available letters: {' '.join(letters)}\n"
            f"Minimum length: {min_length}\n"
        )

    lines = ["=" * 80, f"  TOTAL: {len(words)} WORDS FOUND", "=" * 80, ""]
    by_length = WordFinder.group_by_length(words)
    for length in sorted(by_length.keys(), reverse=True):
        words_by_length = by_length[length]
        lines.append(f"{length} LETTERS ({len(words_by_length)} words)")
        lines.append("-" * 80)
        for i in range(0, len(words_by_length), RESULT_COLUMNS):
            # the empty word would otherwise print as a blank row
            row = [p or EMPTY_WORD_LABEL for p in words_by_length[i:i + RESULT_COLUMNS]]
            lines.append("   " + "  ".join(f"{p:<15}" for p in row).rstrip())
        lines.append("")
    return "\n".join(lines) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s: %(message)s')

    finder = WordFinder(normalize_case=args.upper)
    if args.dictionary:
        finder.load_dictionary(args.dictionary)
    else:
        logger.info("Using embedded basic dictionary")
        finder.load_basic_dictionary()

    letters = finder.normalize_input(args.letters)
    words = finder.find_sorted(letters, args.min_length, args.strategy)
    sys.stdout.write(format_results(letters, words, args.min_length))
    return 0


if __name__ == '__main__':
    sys.exit(main())
