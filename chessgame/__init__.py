"""Two-player chess engine that validates moves and answers a graphics front end over a pipe."""

__version__ = "1.0.0"