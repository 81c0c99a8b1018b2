"""
Grid module for word search puzzle generation.
Handles random placement of words, distractor fill-in and CSV serialization.
"""

import random
import logging
import string
from typing import List, Tuple, Optional, Dict, Any
from dataclasses import dataclass

from wordfind.direction import Direction, EASY_DIRECTIONS, HARD_DIRECTIONS
from wordfind.errors import PlacementError


BLANK = " "

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def ascii_upper(word: str) -> str:
    """Uppercase ASCII letters only, leaving any other character as is."""
    return word.translate(_ASCII_UPPER)


@dataclass
class PlacedWord:
    """Represents a word placed in the grid."""
    word: str
    x: int
    y: int
    direction: Direction
    
    def coordinates(self) -> List[Tuple[int, int]]:
        """Get all (x, y) cells occupied by this word."""
        dx, dy = self.direction.incrementors()
        return [(self.x + i * dx, self.y + i * dy) for i in range(len(self.word))]
    
    @property
    def end(self) -> Tuple[int, int]:
        """Get the cell holding the last letter."""
        dx, dy = self.direction.incrementors()
        steps = max(len(self.word) - 1, 0)
        return self.x + steps * dx, self.y + steps * dy
    
    def to_dict(self) -> Dict[str, Any]:
        end_x, end_y = self.end
        return {
            'word': self.word,
            'start': [self.x, self.y],
            'end': [end_x, end_y],
            'direction': self.direction.value
        }


class PuzzleGrid:
    """Square word search grid and the words placed into it."""
    
    def __init__(self, size: int = 20, max_tries: int = 10000, hard: bool = False,
                 rng: Optional[random.Random] = None):
        """Initialize an empty grid.
        
        Args:
            size: Width and height of the grid
            max_tries: Placement budget for each word
            hard: Allow all 8 directions instead of the easy subset
            rng: Random source, a fresh unseeded one if not provided
        """
        self.size = size
        self.max_tries = max_tries
        self.hard = hard
        self.rng = rng if rng is not None else random.Random()
        self.direction_choices = list(HARD_DIRECTIONS if hard else EASY_DIRECTIONS)
        self.grid = [[BLANK for _ in range(size)] for _ in range(size)]
        self.placed_words: List[PlacedWord] = []
        self.logger = logging.getLogger(__name__)
    
    @property
    def words(self) -> List[str]:
        """Placed words, in placement order."""
        return [pw.word for pw in self.placed_words]
    
    def place(self, word: str) -> PlacedWord:
        """Randomly place a word in the grid.
        
        Only ASCII letters are uppercased.
        
        Raises:
            PlacementError: if no valid position was drawn within the budget
        """
        sanitized_word = ascii_upper(word)
        placement = None
        
        for attempt in range(1, self.max_tries):
            x = self.rng.randrange(self.size)
            y = self.rng.randrange(self.size)
            direction = self.rng.choice(self.direction_choices)
            
            if self.placement_valid(sanitized_word, x, y, direction):
                placement = PlacedWord(sanitized_word, x, y, direction)
                self.logger.debug(f"Placed {sanitized_word} at ({x}, {y}) {direction} "
                                  f"after {attempt} attempts")
                break
        
        if placement is None:
            self.logger.debug(f"Gave up placing {word} after {self.max_tries - 1} attempts")
            raise PlacementError(word)
        
        self.placed_words.append(placement)
        for char, (xi, yi) in zip(sanitized_word, placement.coordinates()):
            self.grid[yi][xi] = char
        
        return placement
    
    def get_indices(self, word: str, x: int, y: int,
                    direction: Direction) -> Tuple[List[int], List[int]]:
        """Get the x and y index of every character of a word placed at (x, y)."""
        dx, dy = direction.incrementors()
        x_indices = []
        y_indices = []
        
        xi, yi = x, y
        for _ in word:
            x_indices.append(xi)
            y_indices.append(yi)
            xi += dx
            yi += dy
        
        return x_indices, y_indices
    
    def placement_valid(self, word: str, x: int, y: int, direction: Direction) -> bool:
        """Check that a word fits at (x, y) without colliding with other letters.
        
        The bound is tested on the position one step past the last character,
        against an inclusive upper limit of ``size``.
        """
        dx, dy = direction.incrementors()
        xi = x + dx * len(word)
        yi = y + dy * len(word)
        
        if not (0 <= xi <= self.size and 0 <= yi <= self.size):
            return False
        
        x_indices, y_indices = self.get_indices(word, x, y, direction)
        for char, xi, yi in zip(word, x_indices, y_indices):
            cell = self.grid[yi][xi]
            if cell != BLANK and cell != char:
                return False
        
        return True
    
    def fill_in(self):
        """Replace every blank cell with a random letter."""
        filled = 0
        for row in self.grid:
            for i, cell in enumerate(row):
                if cell == BLANK:
                    row[i] = self.rng.choice(string.ascii_uppercase)
                    filled += 1
        
        self.logger.debug(f"Filled {filled} blank cells")
    
    def rows(self) -> List[List[str]]:
        """Get a copy of the grid rows."""
        return [list(row) for row in self.grid]
    
    def format_csv(self) -> str:
        """Render the grid and word list in spreadsheet-ready CSV.
        
        Every line starts with three empty fields. The grid is followed by
        three blank lines and then the placed words, two per line.
        """
        lines = []
        for row in self.grid:
            lines.append(",,," + ",".join(row) + "\n")
        
        lines.append("\n\n\n")
        for i, word in enumerate(self.words, start=1):
            lines.append(",,," + word)
            if i % 2 == 0:
                lines.append("\n")
        
        return "".join(lines)
    
    def output(self, file_name: str):
        """Write the grid and word list to a CSV file."""
        with open(file_name, 'w', encoding='utf-8', newline='') as f:
            f.write(self.format_csv())
        
        self.logger.info(f"Wrote {file_name}")
    
    def validate(self) -> Tuple[bool, List[str]]:
        """Validate the grid against the recorded placements."""
        issues = []
        
        if len(self.grid) != self.size:
            issues.append(f"Grid height mismatch: expected {self.size}, got {len(self.grid)}")
        
        for i, row in enumerate(self.grid):
            if len(row) != self.size:
                issues.append(f"Grid width mismatch at row {i}: expected {self.size}, got {len(row)}")
        
        for row in self.grid:
            bad = [cell for cell in row if cell != BLANK and cell not in string.ascii_uppercase]
            if bad:
                issues.append(f"Grid contains invalid characters: {bad}")
        
        for placed_word in self.placed_words:
            actual_word = ""
            for x, y in placed_word.coordinates():
                if 0 <= x < self.size and 0 <= y < self.size:
                    actual_word += self.grid[y][x]
                else:
                    issues.append(f"Word {placed_word.word} extends outside grid bounds")
                    break
            
            if actual_word != placed_word.word:
                issues.append(f"Word {placed_word.word} not found at specified location")
        
        return len(issues) == 0, issues
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert the grid to dictionary representation."""
        return {
            'size': self.size,
            'hard': self.hard,
            'grid': ["".join(row) for row in self.grid],
            'placed_words': [pw.to_dict() for pw in self.placed_words],
            'word_list': self.words
        }
