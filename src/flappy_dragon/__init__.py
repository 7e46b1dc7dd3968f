"""Flappy Dragon: a one-button console arcade game."""

__version__ = "0.1.0"
