#!/usr/bin/env python3

import sys, os
import argparse
import logging
import utf8str
from utf8str import String, FileAccessError, Utf8Error
from cli import configure_logging

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description="Print newline, word, character and byte counts for each FILE, and a total line if more than one \
        FILE is specified. A word is a non-zero-length sequence of characters delimited by Unicode white space."
    )
    parser.add_argument("files", nargs="*", default=["-"], help="Files to process")
    parser.add_argument(
        "-c", "--bytes", action="store_true", help="print the byte counts"
    )
    parser.add_argument(
        "-m", "--chars", action="store_true", help="print the character counts"
    )
    parser.add_argument(
        "-l", "--lines", action="store_true", help="print the newline counts"
    )
    parser.add_argument(
        "-L",
        "--max-line-length",
        action="store_true",
        help="print the maximum display width",
    )
    parser.add_argument(
        "-w", "--words", action="store_true", help="print the word counts"
    )
    parser.add_argument(
        "--files0-from",
        metavar="filename",
        help="Read input from the files specified by NUL-terminated names in file F;"
        " If F is - then read names from standard input",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="log more details, repeat for debug output"
    )

    parser.add_argument("--version", action="version", version=utf8str.__version__)
    return parser.parse_args(argv)


def count_text(text: String):
    """Newline, word, character and byte counts plus the widest line, in columns."""
    line_count = 0
    word_count = 0
    char_count = 0
    max_line_length = 0

    in_word = False
    line_length = 0
    for _, scalar in text:
        char_count += 1
        if utf8str.is_whitespace(scalar):
            in_word = False
        elif not in_word:
            in_word = True
            word_count += 1
        if scalar == 0x0A:
            line_count += 1
            max_line_length = max(max_line_length, line_length)
            line_length = 0
        else:
            line_length += utf8str.column_count(scalar)

    max_line_length = max(max_line_length, line_length)
    return {
        "line_count": line_count,
        "word_count": word_count,
        "char_count": char_count,
        "byte_count": text.byte_length,
        "max_line_length": max_line_length,
    }


def wc(file_path, args):
    if file_path == "-":  # read from stdin
        text = String(sys.stdin.buffer.read())
    else:
        try:
            text = String.from_file(file_path)
        except FileAccessError as e:
            logger.info("%s", e)
            return f"No such file: {file_path}", False

    try:
        return count_text(text), True
    except Utf8Error as e:
        return f"Invalid UTF-8 in {file_path}: {e}", False


def format_output(counts, args, just):
    selected_counts = []
    if args.lines:
        selected_counts.append(counts["line_count"])
    if args.words:
        selected_counts.append(counts["word_count"])
    if args.chars:
        selected_counts.append(counts["char_count"])
    if args.bytes:
        selected_counts.append(counts["byte_count"])
    if args.max_line_length:
        selected_counts.append(counts.get("max_line_length", 0))

    return " ".join(str(count).rjust(just) for count in selected_counts)


def get_files_from(fn):
    if fn == "-":
        names = String(sys.stdin.buffer.read())
    else:
        names = String.from_file(fn)
    return [x for x in names.as_text().split("\0") if os.path.isfile(x)]


def main(argv=None):
    args = parse_arguments(argv)
    configure_logging(args.verbose)
    utf8str.setup_console()

    total_counts = {
        "line_count": 0,
        "word_count": 0,
        "char_count": 0,
        "max_line_length": 0,
        "byte_count": 0,
    }
    if not any([args.lines, args.words, args.chars, args.bytes, args.max_line_length]):
        args.lines = 1
        args.words = 1
        args.bytes = 1

    if args.files0_from:
        if args.files[0] == "-":
            try:
                args.files = get_files_from(args.files0_from)
            except FileAccessError as e:
                logger.info("%s", e)
                print(f"No such file: {args.files0_from}")
                return 1
            except Utf8Error as e:
                print(f"Invalid UTF-8 in {args.files0_from}: {e}")
                return 1
            if len(args.files) == 0:
                return 0

    # wc uses the file size to determine column width when printing
    sizes = [os.stat(fn).st_size for fn in args.files if fn != "-" and os.path.isfile(fn)]
    just = max([len(str(size)) for size in sizes] + [1])

    status = 0
    for file_path in args.files:
        counts, success = wc(file_path, args)
        if success:
            for key in total_counts.keys():
                if key == "max_line_length":
                    total_counts[key] = max(total_counts[key], counts[key])
                else:
                    total_counts[key] += counts.get(key, 0)
            output = format_output(counts, args, just) + f" {file_path}"
            print(output)
        else:
            print(counts)
            status = 1

    if len(args.files) > 1:
        total_output = format_output(total_counts, args, just) + " total"
        print(total_output)
    return status


if __name__ == "__main__":
    sys.exit(main())
