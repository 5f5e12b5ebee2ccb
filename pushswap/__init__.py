"""Two-stack integer sorting with a fixed operation set, plus an operation checker."""

__version__ = "1.0.0"