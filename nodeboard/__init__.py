"""Terminal dashboard for exploring network participant nodes."""

__version__ = "0.1.0"
