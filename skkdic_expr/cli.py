"""
CLI interface for skkdic-expr.

Usage:
    skkdic-expr SKK-JISYO.L + SKK-JISYO.jinmei -o SKK-JISYO.out
    skkdic-expr SKK-JISYO.L -SKK-JISYO.ng          # difference
    skkdic-expr SKK-JISYO.L ^SKK-JISYO.M           # intersection
    cat SKK-JISYO.S | skkdic-expr -e euc-jp > SKK-JISYO.S.euc

Each argument prefixed with ``+``, ``-`` or ``^`` is merged as a union,
difference or intersection. A bare ``+``, ``-`` or ``^`` sets the mode
for the following files.
"""

import argparse
import logging
import sys
from typing import List, Optional

from skkdic_expr import __version__, settings
from skkdic_expr.dictionary import Dictionary, MergeMode, ReadOptions, WriteOptions
from skkdic_expr.exceptions import SkkDictError
from skkdic_expr.trie import save_completion_trie

logger = logging.getLogger(__name__)

APP_NAME = "skkdic-expr"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Merge SKK dictionaries with union, difference and intersection",
        usage=f"{APP_NAME} [-i input_encoding] [-e output_encoding] [-d delimiter] "
              "[-o output] jisyo1 [[+-^] jisyo2]...",
    )
    parser.add_argument(
        "-i", "--input-encoding",
        default="",
        help="Input encoding (default: read the coding cookie)",
    )
    parser.add_argument(
        "-e", "--output-encoding",
        default="",
        help=f"Output encoding (default: {settings.DEFAULT_OUTPUT_ENCODING})",
    )
    parser.add_argument(
        "-d", "--delimiter",
        default="",
        help="Annotation delimiter",
    )
    parser.add_argument(
        "-o", "--output",
        default="",
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--index",
        default="",
        help="Also save an okuri-nasi completion index to this path",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {__version__}",
    )
    parser.add_argument(
        "jisyo",
        nargs=argparse.REMAINDER,
        help="Dictionary files, optionally prefixed with +, - or ^",
    )
    return parser


def setup_logging(verbose: bool) -> None:
    if settings.DEBUG:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')


def merge_sources(dic: Dictionary, args: List[str], read_options: ReadOptions) -> None:
    """
    Read every source argument into ``dic``.

    ``-FILE`` and ``^FILE`` apply to that file only, after which the mode
    returns to union.
    """
    mode = MergeMode.ADD
    for arg in args:
        prefixed = MergeMode.from_prefix(arg[:1])
        if prefixed is None:
            dic.read_file(arg, mode, read_options)
            continue

        mode = prefixed
        if len(arg) > 1:
            dic.read_file(arg[1:], mode, read_options)
            mode = MergeMode.ADD


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    dic = Dictionary(args.delimiter or None)
    read_options = ReadOptions(args.input_encoding)
    write_options = WriteOptions(args.output_encoding or settings.DEFAULT_OUTPUT_ENCODING)

    try:
        if not args.jisyo:
            stats = dic.read(sys.stdin.buffer, MergeMode.ADD, read_options)
            logger.info(f"Read stdin: {stats.merged} lines merged, {stats.skipped} skipped")
        else:
            merge_sources(dic, args.jisyo, read_options)

        if args.output:
            dic.write_file(args.output, write_options)
        else:
            dic.write(sys.stdout.buffer, write_options)

        if args.index:
            save_completion_trie(dic, args.index)
    except (SkkDictError, OSError) as e:
        print(f"error : {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
