"""formatsig - placeholder signatures for localized format strings."""

__version__ = "0.1.0"
