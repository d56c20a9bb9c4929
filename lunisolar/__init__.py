"""Vietnamese/Chinese lunisolar calendar and sexagenary cycle."""

__version__ = "0.1.0"
