"""import-map: dependency graphs and circular import detection for JS/TS/Vue sources."""

__version__ = "0.1.0"
