"""Solvers for the 2016 puzzle calendar, one module per day, and an assembunny interpreter."""

__version__ = "1.0.0"