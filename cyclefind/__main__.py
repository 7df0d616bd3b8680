#!/usr/bin/env python
# -*- coding: utf-8 -*-

import argparse
import json
import sys
import time

import clipboard

from ._version import __version__
from .game import total_load, pulse_product, DebugOptions, DEFAULT_SPINS, DEFAULT_PRESSES

SYSTEMS = ('reflector', 'pulses')


def elapsed_readable(seconds, decimals=0):
    """Given an elapsed time in seconds and optionally number of decimal places to round seconds to,
    return a human-readable string describing it.
    """
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(int(minutes), 60)
    s = f"{round(seconds, decimals)}s"

    if minutes != 0:
        s = f"{minutes}m " + s

    if hours != 0:
        s = f"{hours}h " + s

    return s


def parse_debug(debug_str):
    """Convert a --debug option string (e.g. `c100,s0.5`) to DebugOptions."""
    spin = 0
    speed = 10
    for s in debug_str.split(','):
        if s and s[0] == 'c':
            spin = int(s[1:])
        elif s and s[0] == 's':
            speed = float(s[1:])

    return DebugOptions(spin=spin, speed=speed)


def read_input(input_file):
    """Return the contents of the given file, or of the clipboard if the file is an interactive terminal."""
    with input_file:  # input_file is already open but `with` will close it for us
        if not input_file.isatty():
            return input_file.read()

    # If no STDIN input provided, instead of waiting on user input, use clipboard contents
    return clipboard.paste()


def main(args: argparse.Namespace):
    start = time.time()
    input_str = read_input(args.input_file)
    if not input_str.strip():
        raise ValueError("No input provided")

    if args.system == 'reflector':
        target = args.target if args.target is not None else DEFAULT_SPINS
        result = total_load(input_str, spins=target, verbose=args.verbose, debug=args.debug,
                            return_json=args.json)
    else:
        target = args.target if args.target is not None else DEFAULT_PRESSES
        result = pulse_product(input_str, presses=target, verbose=args.verbose, return_json=args.json)

    if args.json:
        result['system'] = args.system
        print(json.dumps(result, indent=4))
    else:
        print(result)

    if args.verbose:
        print(f"Elapsed time: {elapsed_readable(time.time() - start, decimals=3)}", file=sys.stderr)


if __name__ == '__main__':
    sys.tracebacklimit = 0  # Suppress traceback in STDERR output

    parser = argparse.ArgumentParser(prog='python -m cyclefind',  # Don't show Usage: __main__.py
                                     description="Compute the state of a simulated system after a very large number\n"
                                                 "of steps, by detecting when its state starts repeating.",
                                     formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument('--version', action='version', version=__version__, help="Print program version and exit")
    parser.add_argument('system', choices=SYSTEMS,
                        help="reflector: Load on the north beams of a tilting rock platform after N spin cycles.\n"
                             "pulses: Product of low and high pulse counts after N button presses.")
    parser.add_argument('input_file', type=argparse.FileType('r', encoding='utf-8'),  # Accept path arg or stdin pipe
                        nargs='?', default=sys.stdin,
                        help="File containing the platform grid or module network.\n"
                             "If not provided, attempts to use the contents of the clipboard.")
    parser.add_argument('--target', type=int, default=None,
                        help=f"Number of spins (reflector) or button presses (pulses) to simulate.\n"
                             f"Default {DEFAULT_SPINS:,} spins or {DEFAULT_PRESSES:,} presses.")
    stdout_args = parser.add_mutually_exclusive_group()
    stdout_args.add_argument('--json', action='store_true',
                             help="Print JSON containing the answer, the target index searched for, and the\n"
                                  "detected cycle's start, end, length and target-equivalent index (or null).")
    stdout_args.add_argument('--verbose', action='store_true',
                             help="Report the detected cycle and the elapsed time to STDERR.")
    parser.add_argument('--debug', nargs='?', const='', type=str,
                        help="reflector only: Print an updating view of the platform while it spins.\n"
                             "Can accept a comma-separated string with any of the following options:\n"
                             "cC: Start showing from spin C. Default 0.\n"
                             "sS: Speed of debug in spins/s. Default 10.\n"
                             "E.g. --debug=c100,s0.5 starts showing on spin 100, at half a spin per second.")
    args = parser.parse_args()

    # Flag sanity checks
    if args.target is not None and args.target < 0:
        raise parser.error("--target must be non-negative.")

    if args.debug is not None:
        if args.system != 'reflector':
            raise parser.error("--debug is only supported for reflector.")
        args.debug = parse_debug(args.debug)
    else:
        args.debug = False

    # Raise any caught errors from None to also suppress python's implicit exception chaining
    try:
        main(args)
    except Exception as e:
        raise e from None
