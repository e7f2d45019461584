"""Prospect - procedural player generation with imperfect scouting."""

__version__ = "0.1.0"
