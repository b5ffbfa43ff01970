"""Steam Library Browser - browse and launch installed Steam games."""

__version__ = "0.1.0"
