"""Console manager for basketball teams and players backed by JSON files."""

__version__ = "0.1.0"