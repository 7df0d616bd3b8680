#!/usr/bin/env python
# -*- coding: utf-8 -*-

from __future__ import annotations

import collections
from collections import namedtuple
from typing import List, Optional

from .exceptions import InputParseError

LOW = False
HIGH = True

BROADCASTER_NAME = 'broadcaster'


class PulseCounts(namedtuple("PulseCounts", ('low', 'high'))):
    """Immutable tally of low and high pulses sent. Adds, subtracts, and scales element-wise."""
    __slots__ = ()

    def __add__(self, other):
        return PulseCounts(self.low + other[0], self.high + other[1])

    def __sub__(self, other):
        return PulseCounts(self.low - other[0], self.high - other[1])

    def __mul__(self, n):
        return PulseCounts(self.low * n, self.high * n)
    __rmul__ = __mul__

    def product(self):
        return self.low * self.high


class Module:
    """Parent class for all pulse network modules. By default a module absorbs any pulse it receives."""
    __slots__ = 'name', 'inputs', 'outputs'

    def __init__(self, name: str):
        self.name = name
        self.inputs: List[Module] = []
        self.outputs: List[Module] = []

    def __repr__(self):
        return f'{type(self).__name__}({self.name!r})'

    def connect(self, other: Module):
        """Add a connection from this module to the given module."""
        self.outputs.append(other)
        other.add_input(self)

    def add_input(self, other: Module):
        self.inputs.append(other)

    def receive(self, sender: Module, pulse: bool) -> Optional[bool]:
        """Handle a pulse from the given sender, returning the pulse to send to all outputs, or None to send nothing."""
        return None

    def reset(self):
        pass

    def hashable_repr(self):
        """Represent this module's state in a hashable format."""
        return None


class Output(Module):
    """A module with no outgoing connections (e.g. `output` or `rx`), which only absorbs pulses."""
    __slots__ = ()


class Broadcaster(Module):
    __slots__ = ()

    def receive(self, sender, pulse):
        return pulse


class FlipFlop(Module):
    """Ignores high pulses; toggles on a low pulse, sending high if it turned on and low if it turned off."""
    __slots__ = 'on',
    prefix = '%'

    def __init__(self, name):
        super().__init__(name)
        self.on = False

    def receive(self, sender, pulse):
        if pulse == HIGH:
            return None

        self.on = not self.on
        return HIGH if self.on else LOW

    def reset(self):
        self.on = False

    def hashable_repr(self):
        return self.on


class Conjunction(Module):
    """Remembers the most recent pulse from each input (initially low), sending low only if all of them are high."""
    __slots__ = 'memory',
    prefix = '&'

    def __init__(self, name):
        super().__init__(name)
        self.memory: List[bool] = []  # Kept in lockstep with self.inputs

    def add_input(self, other):
        super().add_input(other)
        self.memory.append(LOW)

    def receive(self, sender, pulse):
        # A module may feed a conjunction more than once; all such connections share the most recent pulse
        for i, module in enumerate(self.inputs):
            if module is sender:
                self.memory[i] = pulse

        return LOW if all(self.memory) else HIGH

    def reset(self):
        self.memory = [LOW] * len(self.inputs)

    def hashable_repr(self):
        return tuple(self.memory)


PREFIX_TO_MODULE_TYPE = {cls.prefix: cls for cls in (FlipFlop, Conjunction)}


class PulseNetwork:
    """A network of modules passing low/high pulses, started by pushing a button wired to the broadcaster."""
    __slots__ = 'modules', 'broadcaster', 'button_presses'

    def __init__(self, network_str: str):
        self.modules = {}  # name: Module, in order of first appearance
        self.button_presses = 0

        # Parse all module definitions first so that connections can refer to modules defined later
        connections = []
        for line_num, line in enumerate(network_str.strip().split('\n'), start=1):
            line = line.strip()
            if not line:
                continue

            try:
                module_str, dests_str = line.split('->')
                module = self.parse_module(module_str.strip())
                dest_names = [s.strip() for s in dests_str.split(',')]
                if not all(dest_names):
                    raise ValueError("Empty destination module name")
            except ValueError as e:
                raise InputParseError(f"Line {line_num}: Invalid module definition `{line}`: {e}") from e

            if module.name in self.modules:
                raise InputParseError(f"Line {line_num}: Module `{module.name}` is defined more than once")

            self.modules[module.name] = module
            connections.append((module, dest_names))

        if BROADCASTER_NAME not in self.modules:
            raise InputParseError(f"Network has no `{BROADCASTER_NAME}` module")
        self.broadcaster = self.modules[BROADCASTER_NAME]

        for module, dest_names in connections:
            for dest_name in dest_names:
                # Any module that is only ever a destination is a sink
                if dest_name not in self.modules:
                    self.modules[dest_name] = Output(dest_name)

                module.connect(self.modules[dest_name])

    @classmethod
    def parse_module(cls, s: str) -> Module:
        """Given the left-hand side of a module definition (e.g. `%a`), return a new module of the appropriate type."""
        if s == BROADCASTER_NAME:
            return Broadcaster(s)
        elif s and s[0] in PREFIX_TO_MODULE_TYPE:
            if len(s) == 1:
                raise ValueError("Missing module name")
            return PREFIX_TO_MODULE_TYPE[s[0]](s[1:])
        elif s:
            return Output(s)
        else:
            raise ValueError("Missing module name")

    def reset(self):
        """Restore every module to its initial state."""
        for module in self.modules.values():
            module.reset()
        self.button_presses = 0

    def hashable_repr(self):
        """Return a hashable representation of the state of all modules."""
        return tuple(module.hashable_repr() for module in self.modules.values())

    def push_button(self) -> PulseCounts:
        """Send a low pulse to the broadcaster and propagate all resulting pulses in order until the network settles.
        Return the count of low and high pulses sent, including the button's.
        """
        low, high = 1, 0  # The button's pulse to the broadcaster
        self.button_presses += 1

        # Queue of modules about to send a pulse to all their outputs
        pending = collections.deque([(self.broadcaster, LOW)])
        while pending:
            sender, pulse = pending.popleft()
            for receiver in sender.outputs:
                if pulse == HIGH:
                    high += 1
                else:
                    low += 1

                out_pulse = receiver.receive(sender, pulse)
                if out_pulse is not None:
                    pending.append((receiver, out_pulse))

        return PulseCounts(low, high)

    def presses(self):
        """Push the button forever, yielding (state, cumulative pulse counts) pairs.

        The kth item (0-indexed) describes the network before the kth button press, so its counts are the total sent
        by the first k presses.
        """
        counts = PulseCounts(0, 0)
        while True:
            yield self.hashable_repr(), counts
            counts += self.push_button()
