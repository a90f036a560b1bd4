"""Terminal editor and data model for Rift Of The Necrodancer save game files."""

__version__ = "0.1.0"