"""Monte Carlo simulator for a two-player art heist card game."""

__version__ = "0.1.0"
