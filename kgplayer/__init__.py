"""Local music player core: track library, LRC lyrics, pages, playlist and controls."""

__version__ = "0.1.0"