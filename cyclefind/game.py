#!/usr/bin/env python
# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import Optional

import cursor
import rich

from .cycle import Cycle, find_in_cycle
from .grid import UP
from .pulses import PulseNetwork
from .reflector import Platform

DEFAULT_SPINS = 1_000_000_000
DEFAULT_PRESSES = 1000


@dataclass
class DebugOptions:
    """Debug options for spinning a platform.

    spin: The spin count to start showing the platform at. Default 0.
    speed: The speed to show spins at, in spins / s. Default 10.
    """
    spin: int = 0
    speed: float = 10


def result_json(result, answer):
    """Return a JSON-serializable dict describing a find_in_cycle result and the answer derived from it."""
    if isinstance(result, Cycle):
        cycle = {'start': result.start.index,
                 'end': result.end.index,
                 'length': result.cycle_len,
                 'target_equiv': result.target_equiv.index}
        target = result.target
    else:
        cycle = None
        target = result.target.index

    return {'answer': answer, 'target': target, 'cycle': cycle}


def north_load(grid_str: str) -> int:
    """Return the load on the north beams after tilting the given platform north once."""
    platform = Platform(grid_str)
    platform.tilt(UP)
    return platform.load()


def total_load(grid_str: str, spins=DEFAULT_SPINS, verbose=False, debug: Optional[DebugOptions] = False,
               return_json=False):
    """Return the load on the north beams after spinning the given platform the given number of times.

    Rather than actually performing every spin, the platform is spun until a layout repeats, and the load is read off
    the equivalent spin within the repeating period.

    Args:
        grid_str: Platform grid, one row per line, using `O` for round rocks, `#` for cube rocks and `.` for empty.
        spins: Number of north-west-south-east spin cycles. Default 1,000,000,000.
        verbose: If True, print the detected cycle to STDERR. Default False.
        debug: Print an updating view of the platform while spinning; see DebugOptions. Default False.
        return_json: If True, instead of the load return a dict with fields `answer` (the load), `target` (the
            0-indexed spin-state index searched for) and `cycle` (the detected cycle's bounds, or None).
            Note that no target index exists for 0 spins, in which case `target` is None. Default False.
    """
    if spins < 0:
        raise ValueError(f"Spin count must be non-negative, got {spins}")

    platform = Platform(grid_str)
    if spins == 0:
        answer = platform.load()
        return {'answer': answer, 'target': None, 'cycle': None} if return_json else answer

    try:
        # In debug mode the cursor can annoyingly flicker into the middle of the printed output; hide it
        if debug:
            cursor.hide()

        # The kth spin state is the layout after k + 1 spins
        result = find_in_cycle(platform.spin_states(debug=debug), spins - 1, verbose=verbose)
    except KeyboardInterrupt:
        # Don't persist the last debug print since it was probably interrupted mid-sleep
        if debug:
            debug = None
            cursor.show()
        raise
    except Exception as e:
        raise type(e)(f"Platform spin {platform.spins}: {e}") from e
    finally:
        # Persist the last debug printout
        if debug:
            rich.print(str(platform))
            cursor.show()

    answer = result.project()

    return result_json(result, answer) if return_json else answer


def pulse_product(network_str: str, presses=DEFAULT_PRESSES, verbose=False, return_json=False):
    """Return the product of the total low and high pulses sent after pushing the network's button the given number
    of times.

    The button is pushed until the network's state repeats, after which the pulse counts of the remaining presses are
    extrapolated from the repeating period.

    Args:
        network_str: Module definitions, one `name -> dest, dest` line per module. Names are prefixed with `%` for
            flip-flops and `&` for conjunctions; `broadcaster` must be defined.
        presses: Number of button presses. Default 1000.
        verbose: If True, print the detected cycle to STDERR. Default False.
        return_json: If True, instead of the product return a dict with fields `answer` (the product), `low`, `high`,
            `target` (the press count) and `cycle` (the detected cycle's bounds, or None). Default False.
    """
    if presses < 0:
        raise ValueError(f"Press count must be non-negative, got {presses}")

    network = PulseNetwork(network_str)

    try:
        result = find_in_cycle(network.presses(), presses, verbose=verbose)
    except Exception as e:
        raise type(e)(f"Button press {network.button_presses}: {e}") from e

    counts = result.project(cumulative=True)
    answer = counts.product()

    if return_json:
        run_data = result_json(result, answer)
        run_data['low'], run_data['high'] = counts
        return run_data

    return answer
