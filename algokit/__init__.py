"""Classic algorithms and data structures in plain Python: sorting, number
functions, array routines, dynamic programming, expressions, graphs and
linked lists."""

__version__ = "0.1.0"