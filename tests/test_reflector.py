#!/usr/bin/env python
# -*- coding: utf-8 -*-

from itertools import islice
from pathlib import Path
import unittest
import sys

# Insert the parent directory to sys path so cyclefind is accessible even if it's not available system-wide
sys.path.insert(1, str(Path(__file__).parent.parent))

from cyclefind import Platform, InputParseError
from cyclefind.grid import UP, DOWN, LEFT, RIGHT, Position
import test_data


def layout(grid_str):
    return tuple(grid_str.strip().split('\n'))


class TestPlatform(unittest.TestCase):
    def test_parse(self):
        platform = Platform(test_data.platform)
        self.assertEqual(platform.num_rows, 10)
        self.assertEqual(platform.num_cols, 10)
        self.assertEqual(platform[Position(0, 0)], 'O')
        self.assertEqual(platform[Position(5, 0)], '#')
        self.assertEqual(platform.hashable_repr(), layout(test_data.platform))

    def test_parse_invalid(self):
        """Tests for malformed platform grids."""
        for test_id, grid_str in test_data.invalid_platforms:
            with self.subTest(msg=test_id):
                with self.assertRaises(InputParseError):
                    Platform(grid_str)

    def test_tilt_north(self):
        platform = Platform(test_data.platform)
        platform.tilt(UP)
        self.assertEqual(platform.hashable_repr(), layout(test_data.platform_tilted_north))
        self.assertEqual(platform.load(), 136)

    def test_tilt_directions(self):
        """Test tilting a small platform in each direction."""
        grid_str = 'O.O\n.#.\nO..'
        expected_layouts = {UP: ('O.O', 'O#.', '...'),
                            DOWN: ('...', 'O#.', 'O.O'),
                            LEFT: ('OO.', '.#.', 'O..'),
                            RIGHT: ('.OO', '.#.', '..O')}
        for direction, expected in expected_layouts.items():
            with self.subTest(msg=repr(direction)):
                platform = Platform(grid_str)
                platform.tilt(direction)
                self.assertEqual(platform.hashable_repr(), expected)

    def test_tilt_idempotent(self):
        platform = Platform(test_data.platform)
        platform.tilt(LEFT)
        tilted = platform.hashable_repr()
        platform.tilt(LEFT)
        self.assertEqual(platform.hashable_repr(), tilted)

    def test_spin(self):
        """Test the layouts after each of the first few spins."""
        platform = Platform(test_data.platform)
        for i, expected in enumerate(test_data.platform_spins, start=1):
            with self.subTest(msg=f"spin {i}"):
                platform.spin()
                self.assertEqual(platform.spins, i)
                self.assertEqual(platform.hashable_repr(), layout(expected))

    def test_spin_states(self):
        """Test that spin states describe the platform after each spin, starting from the first."""
        platform = Platform(test_data.platform)
        states = list(islice(platform.spin_states(), len(test_data.platform_spins)))

        for i, (state, load) in enumerate(states):
            with self.subTest(msg=f"state {i}"):
                expected = Platform(test_data.platform_spins[i])
                self.assertEqual(state, expected.hashable_repr())
                self.assertEqual(load, expected.load())

        self.assertEqual(platform.spins, len(test_data.platform_spins))

    def test_load(self):
        self.assertEqual(Platform(test_data.platform_tilted_north).load(), 136)
        self.assertEqual(Platform('O\n.\n#\nO').load(), 4 + 1)
        self.assertEqual(Platform('...\n#..').load(), 0)

    def test_str(self):
        platform = Platform('O#.')
        self.assertEqual(str(platform), '[bold yellow]O[/][dim]#[/] \nSpin: 0')


if __name__ == '__main__':
    unittest.main(verbosity=0, exit=False)
