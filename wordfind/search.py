"""
Word search solver, used to check generated answer keys.
"""

from typing import Dict, List, Optional

from wordfind.direction import Direction
from wordfind.grid import PlacedWord, ascii_upper


def find_word(rows: List[List[str]], word: str) -> Optional[PlacedWord]:
    """Find a word reading in any of the 8 directions."""
    target_word = ascii_upper(word)
    height = len(rows)
    
    for direction in Direction:
        dx, dy = direction.incrementors()
        
        for y in range(height):
            width = len(rows[y])
            for x in range(width):
                # Check if word can fit in this direction from this position
                end_x = x + dx * (len(target_word) - 1)
                end_y = y + dy * (len(target_word) - 1)
                
                if not (0 <= end_y < height and 0 <= end_x < len(rows[end_y])):
                    continue
                
                found_word = "".join(
                    rows[y + i * dy][x + i * dx] for i in range(len(target_word))
                )
                if found_word == target_word:
                    return PlacedWord(target_word, x, y, direction)
    
    return None


def solve_word_search(rows: List[List[str]], target_words: List[str]) -> Dict[str, Optional[PlacedWord]]:
    """Find specified words in a grid."""
    return {ascii_upper(word): find_word(rows, word) for word in target_words}
