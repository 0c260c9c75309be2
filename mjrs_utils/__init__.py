"""Command-line generators of wrapper code from MuJoCo C headers."""

__version__ = "0.1.0"