"""
Runs a complete word search generation: load, place, export.
"""

import logging
import random
from typing import Dict, Any, List, Optional

from wordfind.config import validate_config
from wordfind.errors import ConfigError
from wordfind.export import ExportManager, SUPPORTED_FORMATS
from wordfind.grid import PuzzleGrid
from wordfind.lexicon import load_words, check_lengths


logger = logging.getLogger(__name__)


def run(config: Dict[str, Any], rng: Optional[random.Random] = None) -> List[str]:
    """Generate a word search puzzle based on configuration.
    
    Writes the answer key, fills the blanks with random letters, then writes
    the puzzle. Nothing is written if any word is too long or cannot be placed.
    
    Returns:
        Paths of the written files
    """
    words_file = config.get('words_file')
    if not words_file:
        raise ConfigError("no input words file provided")
    
    validate_config(config)
    
    grid_config = config['grid']
    export_config = config['export']
    size = grid_config['size']
    
    words = load_words(words_file)
    
    # Every word is checked before any is placed
    check_lengths(words, size)
    
    formats = export_config.get('formats') or ['csv']
    unsupported = set(formats) - set(SUPPORTED_FORMATS)
    if unsupported:
        raise ConfigError(f"unsupported export formats: {', '.join(sorted(unsupported))}")
    
    if rng is None:
        rng = random.Random(config.get('random_seed'))
    
    puzzle = PuzzleGrid(
        size=size,
        max_tries=grid_config['max_tries'],
        hard=grid_config['hard'],
        rng=rng
    )
    
    logger.info(f"Placing {len(words)} words in a {size}x{size} grid "
                f"({'hard' if puzzle.hard else 'easy'} mode)")
    for word in words:
        puzzle.place(word)
    
    export_manager = ExportManager(export_config['output_dir'])
    written = []
    
    written.append(export_manager.export_csv(puzzle, export_config['answer_key']))
    if 'json' in formats:
        written.append(export_manager.export_json(puzzle, export_config['solution']))
    
    puzzle.fill_in()
    
    written.append(export_manager.export_csv(puzzle, export_config['puzzle']))
    
    logger.info(f"Puzzle statistics: {export_manager.get_puzzle_statistics(puzzle)}")
    return written
