"""
Word list loading for word search puzzles.
"""

import logging
from collections import Counter, defaultdict
from typing import Dict, List, Any, Optional

from wordfind.errors import WordListError, WordTooLongError


logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    """Split text into lines.
    
    Lines end at ``\\n`` with an optional ``\\r`` before it. A final line
    terminator does not start another (empty) line, but blank lines inside
    the text are kept.
    """
    if not text:
        return []
    
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def load_words(file_path: str) -> List[str]:
    """Load words from a plain text file, one word per line."""
    with open(file_path, 'r', encoding='utf-8', newline='') as f:
        try:
            words = split_lines(f.read())
        except UnicodeDecodeError as e:
            raise WordListError(file_path, str(e)) from e
    
    logger.info(f"Loaded {len(words)} words from {file_path}")
    return words


def word_length(word: str) -> int:
    """Length of a word in bytes, which is what the length check compares."""
    return len(word.encode('utf-8'))


def find_too_long(words: List[str], size: int) -> Optional[str]:
    """Get the first word longer than the grid size, if any."""
    for word in words:
        if word_length(word) > size:
            return word
    return None


def check_lengths(words: List[str], size: int):
    """Make sure every word fits in a size x size grid.
    
    Raises:
        WordTooLongError: for the first word that does not fit
    """
    word = find_too_long(words, size)
    if word is not None:
        raise WordTooLongError(word, size)


def get_statistics(words: List[str], size: Optional[int] = None) -> Dict[str, Any]:
    """Get word list statistics."""
    by_length = defaultdict(int)
    for word in words:
        by_length[len(word)] += 1
    
    stats = {
        'total_words': len(words),
        'by_length': dict(sorted(by_length.items())),
        'empty_lines': by_length.get(0, 0),
        'non_alpha': [w for w in words if w and not (w.isascii() and w.isalpha())],
        'duplicates': sorted(w for w, n in Counter(w.upper() for w in words if w).items() if n > 1),
    }
    
    if size is not None:
        stats['too_long'] = [w for w in words if word_length(w) > size]
    
    return stats
