#!/usr/bin/env python
# -*- coding: utf-8 -*-

from itertools import count
from pathlib import Path
from timeit import Timer
import unittest
import sys

from pympler import asizeof

# Insert the parent directory to sys path so cyclefind is accessible even if it's not available system-wide
sys.path.insert(1, str(Path(__file__).parent.parent))

import cyclefind
import test_data

NUM_TIMING_RUNS = 5


def large_platform(size=30):
    """Return a deterministic square platform grid mixing round rocks, cube rocks, and empty space."""
    return '\n'.join(''.join('#' if (row * 7 + col * 3) % 11 == 0
                             else 'O' if (row * 5 + col * 13) % 7 == 0
                             else '.'
                             for col in range(size))
                     for row in range(size))


class TestPerformance(unittest.TestCase):
    def test_performance_find_in_cycle(self):
        """Report the runtime of finding a long cycle, and check that memory use is bounded by the cycle length."""
        period = 10_000

        def run():
            return cyclefind.find_in_cycle(((n % period, n) for n in count()), 10 ** 15)

        result = run()
        self.assertEqual(result.cycle_len, period)

        best_time = min(Timer(run).repeat(NUM_TIMING_RUNS, number=1))
        print(f"find_in_cycle, period {period}: {best_time:.4f}s")

        # The result shouldn't hold onto the history of the sequence
        result_size = asizeof.asizeof(result)
        print(f"Cycle result size: {result_size} bytes")
        self.assertLess(result_size, 2000)

    def test_performance_platform(self):
        """Report the runtime of projecting a large platform a billion spins forward."""
        grid_str = large_platform()
        platform = cyclefind.Platform(grid_str)
        print(f"Platform memory: {asizeof.asizeof(platform)} bytes")

        run_data = cyclefind.total_load(grid_str, return_json=True)
        self.assertIsNotNone(run_data['cycle'])

        best_time = min(Timer(lambda: cyclefind.total_load(grid_str)).repeat(NUM_TIMING_RUNS, number=1))
        print(f"Platform, {run_data['cycle']['end'] + 1} spins simulated: {best_time:.4f}s")

    def test_performance_pulses(self):
        """Report the runtime of extrapolating pulse counts from a short network period."""
        best_time = min(Timer(lambda: cyclefind.pulse_product(test_data.pulse_network_output, presses=10 ** 12))
                        .repeat(NUM_TIMING_RUNS, number=1))
        print(f"Pulse network, 10^12 presses: {best_time:.4f}s")
        self.assertLess(best_time, 1)


if __name__ == '__main__':
    unittest.main(verbosity=0, exit=False)
