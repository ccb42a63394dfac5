"""Rubik's cube model, move tables, genetic-algorithm solver and command line."""

__version__ = "0.1.0"
__all__ = ["moves", "cube", "solver", "cli"]