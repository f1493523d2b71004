"""Task migration for Obsidian daily notes."""

__version__ = "0.1.0"
