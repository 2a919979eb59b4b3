"""Command-line front end: compress a file or restore it."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from huffpack.codec import decode, encode
from huffpack.dictionary import build_dictionary
from huffpack.files import read_file, with_extension
from huffpack.frequencies import FrequencyTable
from huffpack.tree import build_node_list, build_tree

ENCODE = "-c"
DECODE = "-d"
HELP = "-h"

USAGE = (
    "Usage: huffpack [option] <input_file> [output_file]\n"
    "  -c           Encode the file\n"
    "  -d           Decode the file\n"
    "  -h, -help    Show this help"
)


class UsageError(Exception):
    """Raised for invalid command-line arguments."""


def parse_arguments(argv: Sequence[str]) -> tuple[str, Optional[str], Optional[str]]:
    """Return ``(mode, input_path, output_path)`` from the arguments.

    The output path defaults to the input path. For help, both paths are None.
    """
    if not argv:
        raise UsageError("no arguments")
    option = argv[0]
    if option in ("-h", "-help"):
        return HELP, None, None
    if option in (ENCODE, DECODE):
        if len(argv) < 2:
            raise UsageError("missing input file")
        input_path = argv[1]
        output_path = argv[2] if len(argv) >= 3 else input_path
        return option, input_path, output_path
    raise UsageError(f"unknown option: {option}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        mode, input_path, output_path = parse_arguments(argv)
    except UsageError:
        print("\nInvalid parameters.\nUse -help or -h for help (huffpack -help)")
        return 1

    if mode == HELP:
        print(USAGE)
        return 0

    assert input_path is not None and output_path is not None
    encoded_path = with_extension(input_path, "huf")

    try:
        data = read_file(input_path)
        if not data:
            raise ValueError(f"file '{input_path}' is empty")
        print(f"\n\tFile '{input_path}' read successfully. Size: {len(data)} bytes")

        if mode == ENCODE:
            table = FrequencyTable()
            table.add_bytes(data)
            dictionary = build_dictionary(build_tree(build_node_list(table)))
            print(f"\n=== Encoding: '{input_path}' => '{encoded_path}' ===")
            with open(input_path, "rb") as source, open(encoded_path, "wb") as dest:
                encode(source, dest, dictionary)
            print(f"Encoding finished: {encoded_path}")
        else:
            print(f"\n=== Decoding: '{encoded_path}' => '{output_path}' ===")
            with open(encoded_path, "rb") as source, open(output_path, "wb") as dest:
                decode(source, dest)
            print(f"Decoding finished: {output_path}")
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())