#!/usr/bin/env python
# -*- coding: utf-8 -*-

from collections import namedtuple
from enum import IntEnum


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def __repr__(self):
        return self.name

    def opposite(self):
        return Direction((self.value + 2) % 4)


# Convenience
CARDINAL_DIRECTIONS = UP, RIGHT, DOWN, LEFT = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)

# North, then west, south, east
SPIN_ORDER = (UP, LEFT, DOWN, RIGHT)


class Position(namedtuple("Position", ('col', 'row'))):
    '''Grid position, with (col, row) 0-indexed from the top left of the grid.'''

    dirn_to_delta = {UP: (0, -1),
                     RIGHT: (1, 0),
                     DOWN: (0, 1),
                     LEFT: (-1, 0)}

    __slots__ = ()

    def __str__(self):
        return f'({self.col}, {self.row})'
    __repr__ = __str__

    def __add__(self, other):
        if isinstance(other, Direction):
            c_delta, r_delta = self.dirn_to_delta[other]
            return Position(self.col + c_delta, self.row + r_delta)
        else:
            return Position(self.col + other[0], self.row + other[1])

    def in_bounds(self, num_cols, num_rows):
        return 0 <= self.col < num_cols and 0 <= self.row < num_rows
