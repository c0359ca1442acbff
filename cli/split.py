#!/usr/bin/env python3

import argparse
import logging
import sys
import utf8str
from utf8str import String, FileAccessError, Utf8Error
from cli import configure_logging

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description="Output pieces of FILE to PREFIX0, PREFIX1, ...; default size is 1000 lines, and default PREFIX is 'x'."
    )
    parser.add_argument(
        "file", nargs="?", default="-", help='File to process, "-" for standard input'
    )
    parser.add_argument(
        "prefix", nargs="?", default="x", help='Output file prefix, default is "x"'
    )
    parser.add_argument(
        "-l",
        "--lines",
        type=int,
        default=1000,
        help="Number of lines per output file, default is 1000",
    )
    parser.add_argument(
        "-t",
        "--separator",
        default="\n",
        help="Use SEP instead of newline as the record separator; '\\0' (zero) specifies the NUL character",
    )
    parser.add_argument(
        "-n",
        "--chars",
        type=int,
        default=None,
        help="Put N characters per output file, never splitting a multi-byte character",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="log more details, repeat for debug output"
    )
    parser.add_argument("--version", action="version", version=utf8str.__version__)
    return parser.parse_args(argv)


def split_by_characters(contents: String, chars_per_file: int, output_prefix: str) -> int:
    if chars_per_file <= 0:
        raise ValueError(f"Number of characters per file must be positive, got {chars_per_file}")

    file_part = 0
    while contents:
        current_slice = contents[:chars_per_file]
        if not current_slice:
            raise ValueError("Character mode cannot split input containing NUL bytes")
        current_slice.to_file(f"{output_prefix}{file_part}")
        contents.remove(0, len(current_slice))
        file_part += 1
    return file_part


def split_by_records(contents: String, lines_per_file: int, output_prefix: str, separator: bytes) -> int:
    if lines_per_file <= 0:
        raise ValueError(f"Number of lines per file must be positive, got {lines_per_file}")

    # A complete UTF-8 separator can only match on character boundaries
    file_contents = bytes(contents)
    current_position = 0
    file_part = 0
    while current_position < len(file_contents):
        end = current_position
        for _ in range(lines_per_file):
            newline_position = file_contents.find(separator, end)
            if newline_position == -1:
                end = len(file_contents)
                break
            end = newline_position + len(separator)

        String(file_contents[current_position:end]).to_file(f"{output_prefix}{file_part}")
        file_part += 1
        current_position = end
    return file_part


def split_file(file_path, lines_per_file, output_prefix, separator, chars_per_file):
    if separator == "\\0":
        separator = "\0"
    if file_path == "-":
        file_contents = String(sys.stdin.buffer.read())
    else:
        file_contents = String.from_file(file_path)

    if chars_per_file is not None:
        parts = split_by_characters(file_contents, chars_per_file, output_prefix)
    else:
        parts = split_by_records(file_contents, lines_per_file, output_prefix, separator.encode("utf-8"))
    logger.info("Wrote %d pieces of %s", parts, file_path)
    return parts


def main(argv=None):
    args = parse_arguments(argv)
    configure_logging(args.verbose)
    utf8str.setup_console()

    try:
        split_file(args.file, args.lines, args.prefix, args.separator, args.chars)
    except FileAccessError as e:
        print(e)
        return 1
    except (Utf8Error, ValueError) as e:
        print(f"An error occurred: {e}")
        print("Usage example: split.py [-l LINES] [file] [prefix]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
