"""
Exceptions raised while generating a word search.
"""


class WordFindError(Exception):
    """Base class for word search generation errors."""


class ConfigError(WordFindError):
    """Missing or invalid command line or configuration file."""


class WordTooLongError(WordFindError):
    """A word is longer than the grid is wide."""
    
    def __init__(self, word: str, size: int):
        self.word = word
        self.size = size
        super().__init__(f"{word} is too long to fit in a {size} x {size} puzzle")


class PlacementError(WordFindError):
    """No valid position was found for a word within the retry budget."""
    
    def __init__(self, word: str):
        self.word = word
        super().__init__(f"{word} could not be placed in the puzzle")


class WordListError(WordFindError):
    """The word file could not be decoded."""
    
    def __init__(self, file_path: str, reason: str):
        self.file_path = file_path
        super().__init__(f"could not read {file_path}: {reason}")
