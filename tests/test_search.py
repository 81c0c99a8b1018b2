"""Tests for the word search solver."""

import os
import random
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from wordfind.direction import Direction
from wordfind.grid import PuzzleGrid
from wordfind.search import find_word, solve_word_search


class TestSolver(unittest.TestCase):
    """Tests for finding words in a grid."""

    def setUp(self):
        self.rows = [
            list("CAT "),
            list(" O  "),
            list("  W "),
            list("GOD "),
        ]

    def test_find_right(self):
        found = find_word(self.rows, "cat")
        self.assertEqual((found.x, found.y, found.direction), (0, 0, Direction.RIGHT))

    def test_find_down_right(self):
        found = find_word(self.rows, "COW")
        self.assertEqual((found.x, found.y, found.direction), (0, 0, Direction.DOWN_RIGHT))

    def test_find_left(self):
        found = find_word(self.rows, "DOG")
        self.assertEqual((found.x, found.y, found.direction), (2, 3, Direction.LEFT))

    def test_not_found(self):
        self.assertIsNone(find_word(self.rows, "BIRD"))

    def test_solve_generated_grid(self):
        puzzle = PuzzleGrid(size=15, hard=True, rng=random.Random(21))
        words = ["MERCURY", "VENUS", "EARTH", "MARS", "JUPITER", "SATURN"]
        for word in words:
            puzzle.place(word)
        puzzle.fill_in()

        found = solve_word_search(puzzle.rows(), words)
        self.assertEqual(set(found), set(words))
        for word, placement in found.items():
            self.assertIsNotNone(placement, word)


if __name__ == '__main__':
    unittest.main()
