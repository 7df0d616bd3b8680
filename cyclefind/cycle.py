#!/usr/bin/env python
# -*- coding: utf-8 -*-

from collections import namedtuple
from itertools import islice
import sys

from .exceptions import InsufficientSequenceError


class Entry(namedtuple("Entry", ('index', 'value'))):
    """Immutable (index, value) pair recording the value seen at a 0-indexed sequence position."""
    __slots__ = ()


class Cycle(namedtuple("Cycle", ('start', 'end', 'target_equiv', 'target'))):
    """Result of find_in_cycle when a key repeats at or before the target index.

    start: Entry of the repeated key's first occurrence.
    end: Entry of the key's repeat occurrence; [start.index, end.index) is one full period.
    target_equiv: Entry within the period whose index is congruent to target modulo the cycle length.
    target: The originally requested index.
    """
    __slots__ = ()

    @property
    def cycle_len(self):
        return self.end.index - self.start.index

    @property
    def complete_cycles(self):
        """Number of whole periods between target_equiv and target."""
        return (self.target - self.start.index) // self.cycle_len

    def project(self, cumulative=False):
        """Return the value the sequence would have at the target index.

        If cumulative is True, values are treated as running totals (supporting +, - and integer *), so each
        skipped period contributes the difference between the end and start values.
        """
        if not cumulative:
            return self.target_equiv.value

        cycle_delta = self.end.value - self.start.value
        return self.target_equiv.value + cycle_delta * self.complete_cycles


class NoCycle(namedtuple("NoCycle", ('target',))):
    """Result of find_in_cycle when the target index was reached without any key repeating.
    target is the Entry at exactly the requested index.
    """
    __slots__ = ()

    def project(self, cumulative=False):
        """Return the value at the target index. cumulative is accepted for symmetry with Cycle.project."""
        return self.target.value


def find_in_cycle(sequence, target: int, verbose=False):
    """Find the value a (possibly infinite) sequence of (key, value) pairs has at the given 0-indexed target, without
    consuming any items past the target.

    Items are consumed in order until either a key is seen for the second time, in which case the sequence is assumed
    to repeat with that period from the key's first occurrence and a Cycle is returned, or until the item at the target
    index is reached, in which case a NoCycle is returned.

    Args:
        sequence: Iterable of (key, value) pairs. Keys must be hashable; equal keys must imply identical future items.
        target: Index of the item whose value is wanted. May be 0.
        verbose: If True, print the detected cycle bounds to STDERR. Default False.

    Raises:
        InsufficientSequenceError: If the sequence ends before target + 1 items are produced.
    """
    if target < 0:
        raise ValueError(f"Target index must be non-negative, got {target}")

    first_seen = {}  # key: index of its first occurrence
    values = []  # Value at each index before the repeat

    for j, (key, value) in enumerate(islice(sequence, target + 1)):
        i = first_seen.setdefault(key, j)
        if i == j:
            values.append(value)
            continue

        cycle_len = j - i
        target_equiv = ((target - i) % cycle_len) + i
        if verbose:
            print(f"Cycle at {i} -> {j}, need {target_equiv}", file=sys.stderr)

        return Cycle(start=Entry(i, values[i]),
                     end=Entry(j, value),
                     target_equiv=Entry(target_equiv, values[target_equiv]),
                     target=target)

    if len(values) != target + 1:
        raise InsufficientSequenceError(f"Sequence ended after {len(values)} items but target index {target}"
                                        f" requires {target + 1}")

    return NoCycle(target=Entry(target, values[target]))
