"""An asyncio reader-writer lock container and attribute-argument parsing helpers."""

__version__ = "0.1.0"