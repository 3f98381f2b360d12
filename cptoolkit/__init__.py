"""Data structures, graph, number-theory, counting and geometry routines for competitive programming."""

__version__ = "0.1.0"