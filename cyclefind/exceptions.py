#!/usr/bin/env python
# -*- coding: utf-8 -*-


# __module__ set in class definitions so they show as e.g. "InputParseError" instead of
# "cyclefind.exceptions.InputParseError" in exception messages


class InsufficientSequenceError(ValueError):
    """Raised when a sequence ends before the requested target index is reached."""
    __module__ = Exception.__module__


class InputParseError(Exception):
    """Raised when a grid or pulse network string cannot be parsed."""
    __module__ = Exception.__module__
