"""Run two commands joined by a pipe, from an input file to an output file."""

__version__ = "0.1.0"
__all__ = ["cli", "commands", "textutils"]