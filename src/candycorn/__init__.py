"""CANDYCORN: help Jack find the candy corn he dropped while trick-or-treating."""

__version__ = "0.1.0"
