"""A terminal rock-paper-scissors arena game: pieces, board rendering and game loop."""

__version__ = "0.1.0"