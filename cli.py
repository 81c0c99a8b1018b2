"""
Command-line interface module for the word search generator.
Provides additional CLI utilities and commands.
"""

import sys
import argparse
import os
import logging

from wordfind.config import DEFAULT_CONFIG, save_config
from wordfind.export import ExportManager
from wordfind.lexicon import load_words, get_statistics
from wordfind.search import solve_word_search


SAMPLE_WORDS = [
    "COMPUTER", "KEYBOARD", "MONITOR", "PRINTER", "SCANNER",
    "INTERNET", "WEBSITE", "EMAIL", "PASSWORD", "SOFTWARE",
    "HARDWARE", "NETWORK", "DATABASE", "PROGRAM", "CODING"
]


class WordFindCLI:
    """Command-line interface for word search utilities."""
    
    def __init__(self):
        self.logger = logging.getLogger(__name__)
    
    def create_sample_files(self, output_dir: str = "data"):
        """Create sample configuration and word list files."""
        os.makedirs(output_dir, exist_ok=True)
        
        sample_config = {
            'words_file': os.path.join(output_dir, "words.txt"),
            'grid': dict(DEFAULT_CONFIG['grid']),
            'export': dict(DEFAULT_CONFIG['export'], output_dir='output'),
            'random_seed': None,
            'logging': dict(DEFAULT_CONFIG['logging'])
        }
        
        config_path = os.path.join(output_dir, "config.yaml")
        save_config(sample_config, config_path)
        
        print(f"Created sample configuration: {config_path}")
        
        words_path = sample_config['words_file']
        with open(words_path, 'w', encoding='utf-8') as f:
            for word in SAMPLE_WORDS:
                f.write(f"{word}\n")
        
        print(f"Created sample word list: {words_path}")
        
        print("\nSample files created successfully!")
        print(f"You can now run: python main.py --config {config_path}")
    
    def validate_wordlist(self, wordlist_path: str, size: int = 20) -> bool:
        """Validate a word list file."""
        try:
            words = load_words(wordlist_path)
        except OSError as e:
            print(f"Error validating word list: {e}")
            return False
        
        stats = get_statistics(words, size)
        
        print(f"Word List Validation Report: {wordlist_path}")
        print(f"Total words: {stats['total_words']}")
        print(f"Word length distribution: {stats['by_length']}")
        
        issues = []
        
        for word in stats['too_long']:
            issues.append(f"{word} is too long to fit in a {size} x {size} puzzle")
        
        if stats['empty_lines']:
            issues.append(f"{stats['empty_lines']} empty lines will be placed as empty words")
        
        for word in stats['non_alpha']:
            issues.append(f"{word} contains characters other than A-Z")
        
        for word in stats['duplicates']:
            issues.append(f"{word} appears more than once")
        
        if issues:
            print("\nPotential issues:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print("\nWord list appears to be well-formed.")
        
        return len(issues) == 0
    
    def verify_puzzle(self, answer_key_path: str) -> bool:
        """Check that every listed word can be found in an answer key grid."""
        try:
            rows, words = ExportManager.read_csv(answer_key_path)
        except OSError as e:
            print(f"Error verifying puzzle: {e}")
            return False
        
        found = solve_word_search(rows, words)
        missing = [word for word, placement in found.items() if placement is None]
        
        for word, placement in found.items():
            if placement is not None:
                self.logger.info(f"{word}: ({placement.x}, {placement.y}) {placement.direction}")
        
        print(f"Verified {len(found) - len(missing)}/{len(found)} words in {answer_key_path}")
        for word in missing:
            print(f"  - {word} not found")
        
        return not missing


def main():
    """CLI entry point for utility functions."""
    parser = argparse.ArgumentParser(
        description="Word Search Generator CLI Utilities",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Available commands:
  sample-files    Create sample configuration and word list
  validate        Validate a word list file
  verify          Check an answer key against its word list

Examples:
  python cli.py sample-files
  python cli.py validate data/words.txt --size 15
  python cli.py verify answer_key.csv
        """
    )
    
    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    
    sample_parser = subparsers.add_parser('sample-files', help='Create sample files')
    sample_parser.add_argument('--output-dir', default='data', help='Output directory')
    
    validate_parser = subparsers.add_parser('validate', help='Validate word list')
    validate_parser.add_argument('wordlist', help='Word list file to validate')
    validate_parser.add_argument('--size', type=int, default=DEFAULT_CONFIG['grid']['size'],
                                 help='Grid size')
    
    verify_parser = subparsers.add_parser('verify', help='Verify answer key')
    verify_parser.add_argument('answer_key', help='Answer key CSV file')
    
    args = parser.parse_args()
    
    if not args.command:
        parser.print_help()
        return 1
    
    logging.basicConfig(level=logging.INFO, format='%(message)s')
    
    cli = WordFindCLI()
    
    try:
        if args.command == 'sample-files':
            cli.create_sample_files(args.output_dir)
        
        elif args.command == 'validate':
            success = cli.validate_wordlist(args.wordlist, args.size)
            return 0 if success else 1
        
        elif args.command == 'verify':
            success = cli.verify_puzzle(args.answer_key)
            return 0 if success else 1
        
        else:
            print(f"Unknown command: {args.command}")
            return 1
        
        return 0
    
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 1


if __name__ == '__main__':
    sys.exit(main())
