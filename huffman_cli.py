#!/usr/bin/env python3
"""
Command-line Huffman encoder.

Builds a Huffman code from the token frequencies of the given text and prints
the text encoded as a string of 0s and 1s.

Usage:
    huffman-encode "abracadabra"
    huffman-encode --show-codes --vocabulary ab ra c d a -- "abracadabra"
    echo "abracadabra" | huffman-encode --stats
"""
import argparse
import logging
import sys

from huffman_core import INTERNAL_SYMBOL
from huffman_errors import HuffmanError
from huffman_service import HuffmanService, code_statistics

logger = logging.getLogger(__name__)


def read_input(stream=None):
    """Prompt for one line of text and strip surrounding whitespace."""
    stream = stream or sys.stdin
    print("Type your text to encode.")
    text = stream.readline().strip()
    print(f"Your text: {text}")
    return text


def format_code_table(result):
    rows = sorted(result.codebook.items(), key=lambda item: (len(item[1]), item[0]))
    width = max([len(repr(symbol)) for symbol, _ in rows] + [len("Symbol")])
    lines = [f"{'Symbol':<{width}}  {'Count':>7}  Code"]
    for symbol, code in rows:
        lines.append(f"{repr(symbol):<{width}}  {result.counts[symbol]:>7}  {code}")
    return "\n".join(lines)


def format_statistics(stats):
    return "\n".join([
        f"Tokens:          {stats.total}",
        f"Entropy:         {stats.entropy:.4f} bits/token",
        f"Average length:  {stats.average_length:.4f} bits/token",
        f"Encoded length:  {stats.encoded_length} bits",
    ])


def build_parser():
    parser = argparse.ArgumentParser(description="Encode text with a Huffman code built from its own token frequencies")
    parser.add_argument("text", nargs="?", default=None, help="text to encode (read from stdin when omitted)")
    parser.add_argument(
        "--vocabulary",
        nargs="+",
        default=None,
        metavar="TOKEN",
        help="tokens to split the text into (default: the distinct characters of the text)",
    )
    parser.add_argument(
        "--internal-marker",
        default=INTERNAL_SYMBOL,
        help=f"placeholder symbol of internal tree nodes (default: {INTERNAL_SYMBOL!r})",
    )
    parser.add_argument(
        "--pad-single-symbol",
        action="store_true",
        help="give a one-symbol alphabet a 1-bit code instead of an empty one",
    )
    parser.add_argument("--show-codes", action="store_true", help="print the code table")
    parser.add_argument("--stats", action="store_true", help="print entropy and average code length")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    text = args.text.strip() if args.text is not None else read_input()

    try:
        service = HuffmanService(args.internal_marker, args.pad_single_symbol)
        result = service.compress(text, args.vocabulary)
    except (HuffmanError, ValueError) as e:
        logger.debug("encoding failed", exc_info=True)
        print(f"Error! {e}", file=sys.stderr)
        return 1

    if args.show_codes:
        print(format_code_table(result))
    if args.stats:
        print(format_statistics(code_statistics(result.counts, result.codebook)))

    print(f"Result: {result.bits}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
