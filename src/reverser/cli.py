# cli.py

import sys
import argparse
import logging

from reverser.core import reverse
from reverser.logging_utils import setup_logging
from reverser.textutils.sample_loader import load_samples

logger = logging.getLogger(__name__)

SAMPLES = [
    "The fox'es run over to the fences, but don't jump.",
    "olleH cirE, epoh uoy evah a taerg yad! tI saw a erusaelp gniod siht llams tset :)",
    "Will add another sentence - just because I can. Why not!",
]


def _split_lines(raw):
    """Split raw text into lines without treating other whitespace as a break"""
    lines = raw.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def _read_input(args, stdin=None):
    """Handles input from --text, --file, stdin, or the built-in samples"""
    stdin = stdin if stdin is not None else sys.stdin
    if args.text is not None:
        logger.debug("Reading input from --text")
        return [args.text]
    if args.file is not None:
        logger.debug("Reading input from file %s", args.file)
        return load_samples(args.file)
    if stdin is not None and not stdin.isatty():
        lines = _split_lines(stdin.read())
        if lines:
            logger.debug("Reading input from stdin")
            return lines
        logger.debug("stdin is empty")
    logger.debug("No input given, using %d built-in samples", len(SAMPLES))
    return list(SAMPLES)


def run(samples, out=None):
    """Reverse each sample in order and write one result per line"""
    out = out if out is not None else sys.stdout
    for sample in samples:
        print(reverse(sample), file=out)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="letter-reverser",
        description="Reverse the letters of each word, keeping punctuation in place",
    )
    parser.add_argument("-t", "--text", help="Raw text to process")
    parser.add_argument("-f", "--file", help="Path to a text file, one sample per line")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    samples = _read_input(args)

    if not samples or all(s.strip() == "" for s in samples):
        print("No input text.", file=sys.stderr)
        return 1

    run(samples)
    return 0


if __name__ == "__main__":
    sys.exit(main())
