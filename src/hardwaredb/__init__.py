"""In-memory hardware catalog with integrity-checked indexes and ranking."""

__version__ = "0.1.0"
