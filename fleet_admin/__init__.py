"""Admin backend for the fleet & gallery website."""

__version__ = "1.0.0"
