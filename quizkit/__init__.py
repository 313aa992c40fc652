"""Small building blocks: sums, vectors, players, a search tree and matchmaking."""

__version__ = "1.0.0"