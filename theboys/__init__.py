"""Discrete-event simulation of heroes, bases and missions."""

__version__ = "0.1.0"