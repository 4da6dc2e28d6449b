"""pfennig - local-only expense tracking with quick entry and budget pacing."""

__version__ = "0.1.0"
