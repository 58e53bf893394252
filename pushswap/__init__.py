"""Two-stack integer sorting that reports the operations it performs."""

__version__ = "0.1.0"