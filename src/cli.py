#!/usr/bin/env python3
"""
Porter Lab CLI

Usage:
    porter-lab FILE [FILE...]          Stem every word of each file to stdout
    porter-lab --words WORD [WORD...]  Stem single words, one stem per line
    porter-lab                         Stem stdin to stdout

Options:
    --canonical        Canonical six-step algorithm (no residual verb pass)
    --log-level LEVEL  Console log level (default: LOG_LEVEL or INFO)
    --log-file PATH    Also write detailed logs to a rotating file

Files are processed in order; the first file that cannot be read stops the
run with its error message and exit status 1.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import StemmerSettings, get_settings, load_environment
from .file_reader import DocumentError, stem_file
from .logging_config import setup_logging
from .stemmer import stem_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="porter-lab",
        description="Reduce English words to their Porter stems",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Text files to stem")
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Stem these words instead of files")
    parser.add_argument("--canonical", action="store_true",
                        help="Skip the residual verb-suffix step (canonical Porter algorithm)")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Console log level")
    parser.add_argument("--log-file", help="Base path of a rotating log file")
    return parser


def cmd_words(words: List[str], verb_pass: bool, max_word_length: Optional[int]) -> int:
    """Stem single words given on the command line."""
    for word in words:
        print(stem_text(word, verb_pass=verb_pass, max_word_length=max_word_length))
    return 0


def cmd_files(files: List[str], settings: StemmerSettings, verb_pass: bool) -> int:
    """Stem files to stdout, stopping at the first unreadable one."""
    for path in files:
        try:
            output = stem_file(
                path,
                verb_pass=verb_pass,
                max_word_length=settings.max_word_length,
                encoding=settings.encoding,
                max_size=settings.max_file_size,
            )
        except DocumentError as e:
            logger.error(f"{e} {e.reason}".rstrip())
            print(e)
            return 1
        sys.stdout.write(output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    load_environment()
    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    log_level = args.log_level or settings.log_level
    setup_logging(
        log_file=args.log_file,
        console_level=getattr(logging, log_level, logging.INFO),
    )

    verb_pass = settings.verb_pass and not args.canonical
    logger.debug(f"Stemming with verb_pass={verb_pass}, max_word_length={settings.max_word_length}")

    if args.words:
        return cmd_words(args.words, verb_pass, settings.max_word_length)
    if args.files:
        return cmd_files(args.files, settings, verb_pass)

    sys.stdout.write(stem_text(sys.stdin.read(), verb_pass=verb_pass,
                               max_word_length=settings.max_word_length))
    return 0


if __name__ == "__main__":
    sys.exit(main())
