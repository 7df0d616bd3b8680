# Make the more user-facing classes and functions accessible at the top-level (e.g. cyclefind.cycle.Cycle => cyclefind.Cycle)
from ._version import __version__
from .cycle import Entry, Cycle, NoCycle, find_in_cycle
from .reflector import Platform
from .pulses import PulseNetwork, PulseCounts
from .game import north_load, total_load, pulse_product, DebugOptions
from .exceptions import *
