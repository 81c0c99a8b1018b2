"""Tests for word directions."""

import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from wordfind.direction import Direction, EASY_DIRECTIONS, HARD_DIRECTIONS


class TestDirection(unittest.TestCase):
    """Tests for the direction increment table."""

    def test_incrementors(self):
        expected = {
            Direction.RIGHT: (1, 0),
            Direction.UP_RIGHT: (1, -1),
            Direction.UP: (0, -1),
            Direction.UP_LEFT: (-1, -1),
            Direction.LEFT: (-1, 0),
            Direction.DOWN_LEFT: (-1, 1),
            Direction.DOWN: (0, 1),
            Direction.DOWN_RIGHT: (1, 1),
        }
        for direction, step in expected.items():
            self.assertEqual(direction.incrementors(), step)

    def test_incrementors_are_unit_steps(self):
        steps = set()
        for direction in Direction:
            dx, dy = direction.incrementors()
            self.assertIn(dx, (-1, 0, 1))
            self.assertIn(dy, (-1, 0, 1))
            self.assertNotEqual((dx, dy), (0, 0))
            self.assertEqual(direction.incrementors(), (dx, dy))
            steps.add((dx, dy))

        self.assertEqual(len(steps), 8)

    def test_easy_directions(self):
        self.assertEqual(EASY_DIRECTIONS, (
            Direction.RIGHT, Direction.UP_RIGHT, Direction.UP,
            Direction.DOWN, Direction.DOWN_RIGHT,
        ))
        for direction in (Direction.UP_LEFT, Direction.LEFT, Direction.DOWN_LEFT):
            self.assertNotIn(direction, EASY_DIRECTIONS)

    def test_hard_directions(self):
        self.assertEqual(len(HARD_DIRECTIONS), 8)
        self.assertEqual(HARD_DIRECTIONS[0], Direction.RIGHT)
        self.assertEqual(HARD_DIRECTIONS[-1], Direction.DOWN_RIGHT)

    def test_from_string(self):
        self.assertEqual(Direction.from_string("down_right"), Direction.DOWN_RIGHT)
        self.assertEqual(Direction.from_string(" LEFT "), Direction.LEFT)
        with self.assertRaises(ValueError):
            Direction.from_string("sideways")


if __name__ == '__main__':
    unittest.main()
