#!/usr/bin/env python3
"""
Word Search Generator - Main Entry Point
Lays a list of words onto a letter grid and writes the answer key and the
puzzle as CSV tables that can be printed from any spreadsheet program.

The tables print best with the grid cells centered vertically and
horizontally and borders drawn on all sides.
"""

import sys
import argparse
import logging
from typing import Dict, Any, Optional, List

from wordfind.config import load_config
from wordfind.errors import ConfigError, WordFindError
from wordfind.runner import run


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports problems as ConfigError instead of exiting."""
    
    def error(self, message):
        raise ConfigError(message)


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None):
    """Configure structured logging."""
    log_level = getattr(logging, level.upper(), logging.WARNING)
    
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    
    # Root logger
    logger = logging.getLogger()
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(console_handler)
    
    # File handler if specified
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        description="Generate a word search puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py words.txt
  python main.py words.txt hard
  python main.py words.txt --seed 42 --output-dir output --formats csv json
        """
    )
    
    parser.add_argument('words_file', nargs='?', help='Text file with one word per line')
    parser.add_argument('hard', nargs='*',
                        help='Any extra argument also places words backwards and up-left')
    parser.add_argument('--config', help='Configuration file (YAML or JSON)')
    parser.add_argument('--output-dir', help='Output directory')
    parser.add_argument('--formats', nargs='*', choices=['csv', 'json'],
                        help='Export formats')
    parser.add_argument('--seed', type=int, help='Random seed for reproducible puzzles')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    parser.add_argument('--log-file', help='Log file path')
    
    return parser


def build_config(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    """Parse the command line and merge it over the configuration file."""
    # Anything left over, even something that looks like an option, asks for hard mode
    args, extras = build_parser().parse_known_intermixed_args(argv)
    
    config = load_config(args.config)
    
    if args.words_file:
        config['words_file'] = args.words_file
    
    if not config['words_file']:
        raise ConfigError("no input words file provided")
    
    if args.hard or extras:
        config['grid']['hard'] = True
    
    if args.output_dir:
        config['export']['output_dir'] = args.output_dir
    
    if args.formats:
        config['export']['formats'] = args.formats
    
    if args.seed is not None:
        config['random_seed'] = args.seed
    
    if args.log_level:
        config['logging']['level'] = args.log_level
    if args.log_file:
        config['logging']['file'] = args.log_file
    
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the word search generator."""
    try:
        config = build_config(argv)
    except ConfigError as e:
        print(f"There is a problem with your command line: {e}", file=sys.stderr)
        return 1
    
    setup_logging(config['logging']['level'], config['logging']['file'])
    logger = logging.getLogger(__name__)
    
    try:
        written = run(config)
    except (WordFindError, OSError) as e:
        logger.debug(f"Error generating word search: {e}", exc_info=True)
        print(f"There was an error generating: {e}", file=sys.stderr)
        return 1
    
    logger.info(f"Wrote {', '.join(written)}")
    print("Done!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
