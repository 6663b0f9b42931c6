"""span-layout: Evenly place markers or boards between two round platforms."""

__version__ = "0.1.0"
