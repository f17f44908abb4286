"""Worked examples: describable objects, generic holders, a person-keyed mapping, a doubly linked list and thread helpers."""

__version__ = "0.1.0"