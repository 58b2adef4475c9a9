"""Terminal typing practice: type the rows of words before the time runs out."""

__version__ = "0.1.0"
