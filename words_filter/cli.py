#!/usr/bin/env python3
"""
words-filter command line.

Usage:
    words-filter contains [TEXT] -w words.txt [-w more.txt ...]
    words-filter replace [TEXT] -w words.txt [--placeholder '***']

Text is read from stdin when not given. Each word list is loaded into its
own root and all of them share one filter.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .error_handler import UserFriendlyError, handle_error, safe_operation
from .filter import WordsFilter
from .logging_config import setup_logging
from .trie import Root

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_MATCH = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="words-filter",
        description="Detect or replace sensitive words in text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  words-filter contains "some text" -w banned.txt
  echo "some text" | words-filter replace -w banned.txt --placeholder "[x]"
  words-filter replace --strip-space -c filter.yaml "b a d"
        """
    )
    
    parser.add_argument(
        "command",
        choices=["contains", "replace"],
        help="contains: exit 1 if any word matches; replace: print replaced text"
    )
    
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to check (default: read stdin)"
    )
    
    parser.add_argument(
        "--wordlist", "-w",
        type=Path,
        action="append",
        default=[],
        help="Word list file, one word per line (repeatable)"
    )
    
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration YAML file"
    )
    
    parser.add_argument(
        "--placeholder",
        type=str,
        default=None,
        help="Override the replacement string"
    )
    
    parser.add_argument(
        "--strip-space",
        action="store_true",
        default=None,
        help="Remove whitespace before matching"
    )
    
    parser.add_argument(
        "--no-strip-space",
        dest="strip_space",
        action="store_false",
        default=None,
        help="Match text as given, overriding filter.strip_space"
    )
    
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors"
    )
    
    return parser


def _log_level(args: argparse.Namespace, config: Config) -> str:
    if args.quiet:
        return "ERROR"
    if args.verbose:
        return "DEBUG"
    return config.logging.level


@safe_operation("loading word lists")
def load_roots(wf: WordsFilter, paths: List[Path]) -> List[Root]:
    """Load each word list into its own root."""
    return [wf.generate_with_file(path) for path in paths]


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command and return the exit code."""
    config = Config.load(args.config)
    
    if args.placeholder is not None:
        config.filter.placeholder = args.placeholder
    if args.strip_space is not None:
        config.filter.strip_space = args.strip_space
    
    setup_logging(
        level=_log_level(args, config),
        log_file=config.logging.log_file or None,
        force=True,
    )
    
    paths = [Path(p) for p in config.filter.wordlists] + list(args.wordlist)
    if not paths:
        logger.error("No word lists given (use --wordlist or filter.wordlists)")
        return EXIT_ERROR
    
    wf = config.build_filter()
    roots = load_roots(wf, paths)
    
    text = args.text if args.text is not None else sys.stdin.read().rstrip("\n")
    
    if args.command == "contains":
        found = any(wf.contains(text, root) for root in roots)
        print("true" if found else "false")
        return EXIT_MATCH if found else EXIT_CLEAN
    
    for root in roots:
        text = wf.replace(text, root)
    print(text)
    return EXIT_CLEAN


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the words-filter command."""
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except UserFriendlyError as e:
        print(e.user_message, file=sys.stderr)
        return EXIT_ERROR
    except Exception as e:
        title, message = handle_error(e, args.command)
        print(f"{title}: {message}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
