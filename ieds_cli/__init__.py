"""
CLI for the IEDS Calculator

This module provides a command-line interface for running iterated
elimination of dominated strategies on payoff matrices stored as CSV files.
"""

__version__ = "0.1.0"
