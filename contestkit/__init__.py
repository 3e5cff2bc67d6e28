"""Solvers for a collection of competitive programming problems."""

__version__ = "0.1.0"