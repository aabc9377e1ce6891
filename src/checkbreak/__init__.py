"""check-break — spots public signature changes that break callers."""

__version__ = "0.3.0"
