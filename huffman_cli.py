#!/usr/bin/env python3
# filename: huffman_cli.py
"""
Command line front end for the Huffman file codec.

Run with:
    huffman compress notes.txt notes.hf
    huffman decompress notes.hf notes.txt -v
"""
import argparse
import logging
import os
import sys

from huffman_errors import HuffmanError
from huffman_service import HuffmanService


def build_parser():
    parser = argparse.ArgumentParser(prog="huffman", description="Tree-headed Huffman file compression")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log progress (-v) or every code (-vv)")
    subparsers = parser.add_subparsers(dest="command", required=True)
    for command, help_text in (("compress", "Compress SRC into DST"),
                               ("decompress", "Restore SRC into DST")):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("src", help="Input file")
        sub.add_argument("dst", help="Output file")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not os.path.isfile(args.src):
        print(f"input file not found: {args.src}", file=sys.stderr)
        return 1

    service = HuffmanService()
    operation = service.compress_file if args.command == "compress" else service.decompress_file
    try:
        stats = operation(args.src, args.dst)
    except HuffmanError as e:
        print(f"{args.command} failed: {e}", file=sys.stderr)
        return 1

    print(f"{args.command} from {os.path.basename(args.src)} to {os.path.basename(args.dst)}")
    print(f"file: {os.path.getsize(args.src) * 8} bits to {os.path.getsize(args.dst) * 8} bits")
    print(f"read {stats.bits_read} bits, wrote {stats.bits_written} bits")
    print(f"bits saved = {stats.bits_saved}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
