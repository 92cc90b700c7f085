"""Dynamic-programming and graph algorithms over plain Python data."""

__version__ = "0.1.0"