#!/usr/bin/env python
# -*- coding: utf-8 -*-

import platform
import time

import rich

from .exceptions import InputParseError
from .grid import *

IS_WINDOWS = platform.system() == 'Windows'

ROUND_ROCK = 'O'
CUBE_ROCK = '#'
EMPTY = '.'
VALID_CELLS = frozenset((ROUND_ROCK, CUBE_ROCK, EMPTY))


class Platform:
    """A tiltable platform of round rocks, which roll when tilted, and cube rocks, which never move."""
    __slots__ = 'rows', 'spins', '_lanes'

    def __init__(self, grid_str: str):
        lines = [line.strip() for line in grid_str.strip().split('\n')]
        if not lines or not lines[0]:
            raise InputParseError("Platform grid is empty")

        for row_idx, line in enumerate(lines):
            if len(line) != len(lines[0]):
                raise InputParseError(f"Row {row_idx} has length {len(line)}, expected {len(lines[0])}")

            invalid_cells = set(line) - VALID_CELLS
            if invalid_cells:
                raise InputParseError(f"Row {row_idx} contains unknown cell(s) {''.join(sorted(invalid_cells))}")

        self.rows = [list(line) for line in lines]
        self.spins = 0

        # For each tilt direction, precompute the lanes rocks roll along, each ordered from the edge rocks roll towards
        self._lanes = {direction: self._build_lanes(direction) for direction in CARDINAL_DIRECTIONS}

    @property
    def num_rows(self):
        return len(self.rows)

    @property
    def num_cols(self):
        return len(self.rows[0])

    def __getitem__(self, posn):
        return self.rows[posn.row][posn.col]

    def __setitem__(self, posn, cell):
        self.rows[posn.row][posn.col] = cell

    def _build_lanes(self, direction):
        if direction == UP:
            edge = [Position(col, 0) for col in range(self.num_cols)]
        elif direction == DOWN:
            edge = [Position(col, self.num_rows - 1) for col in range(self.num_cols)]
        elif direction == LEFT:
            edge = [Position(0, row) for row in range(self.num_rows)]
        else:
            edge = [Position(self.num_cols - 1, row) for row in range(self.num_rows)]

        lanes = []
        step = direction.opposite()
        for posn in edge:
            lane = []
            while posn.in_bounds(self.num_cols, self.num_rows):
                lane.append(posn)
                posn = posn + step
            lanes.append(lane)

        return lanes

    def tilt(self, direction: Direction):
        """Roll every round rock as far as it will go towards the given edge."""
        for lane in self._lanes[direction]:
            # Index in the lane of the closest cell a rolling rock would come to rest in
            free_idx = 0
            for i, posn in enumerate(lane):
                cell = self[posn]
                if cell == CUBE_ROCK:
                    free_idx = i + 1
                elif cell == ROUND_ROCK:
                    if free_idx != i:
                        self[lane[free_idx]] = ROUND_ROCK
                        self[posn] = EMPTY
                    free_idx += 1

    def spin(self):
        """Tilt north, west, south, then east."""
        for direction in SPIN_ORDER:
            self.tilt(direction)
        self.spins += 1

    def load(self):
        """Return the total load on the north support beams; each round rock weighs its distance from the south edge."""
        return sum(self.num_rows - row_idx
                   for row_idx, row in enumerate(self.rows)
                   for cell in row
                   if cell == ROUND_ROCK)

    def hashable_repr(self):
        """Return a hashable representation of the rock layout, equal iff the layouts are equal."""
        return tuple(''.join(row) for row in self.rows)

    def spin_states(self, debug=None):
        """Spin the platform forever, after each spin yielding a (layout, load) pair.

        The kth item (0-indexed) describes the platform after k + 1 spins.

        Args:
            debug: If provided, a DebugOptions-like object with `spin` and `speed` attributes; each spin from `spin`
                onwards is shown via debug_print at `speed` spins per second.
        """
        while True:
            self.spin()
            if debug and self.spins >= debug.spin:
                self.debug_print(duration=1 / debug.speed)

            yield self.hashable_repr(), self.load()

    def __str__(self):
        """Return a rich-format string of the platform, including the spin count."""
        result = ''
        for row in self.rows:
            result += ''.join('[bold yellow]O[/]' if cell == ROUND_ROCK
                              else '[dim]#[/]' if cell == CUBE_ROCK
                              else ' '
                              for cell in row) + '\n'

        result += f'Spin: {self.spins}'

        return result

    def debug_print(self, duration=0.1):
        """Print the current platform state then clear it from the terminal.
        Args:
            duration: Seconds before clearing the printout from the screen. Default 0.1.
        """
        output = str(self)
        rich.print(output)

        time.sleep(duration)

        # Use the ANSI escape code for moving to the start of the previous line to reset the terminal cursor
        cursor_reset = (output.count('\n') + 1) * "\033[F"  # +1 for the implicit newline print() appends
        if IS_WINDOWS:
            rich.print(cursor_reset, end='')
        else:
            print(cursor_reset, end='')
