"""Two-player Mancala engine with Avalanche and Capture rule variants."""

__version__ = "0.1.0"
