"""Two-stack integer sorter that reports the operations it uses."""

__version__ = "1.0.0"