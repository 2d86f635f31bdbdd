"""Chess board viewer with FEN piece-placement reading and writing."""

__version__ = "0.1.0"