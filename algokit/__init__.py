"""Classic algorithm problems on lists, strings, numbers and matrices, with a small command line."""

__version__ = "0.1.0"