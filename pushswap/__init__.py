"""Two-stack integer sorting that reports the operations it performs, with small string, memory and list helpers."""

__version__ = "0.1.0"