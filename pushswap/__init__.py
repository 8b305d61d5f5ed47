"""Sorting integers with two stacks and a restricted set of operations, and checking operation lists."""

__version__ = "1.0.0"