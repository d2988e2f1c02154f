"""VDI session diagnostic report."""

__version__ = "0.1.0"
