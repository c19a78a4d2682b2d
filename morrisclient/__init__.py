"""Nine Men's Morris client library: configuration, game model, board, move choice and connection."""

__version__ = "0.1.0"