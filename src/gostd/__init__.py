"""gostd: Go standard library version tags and module zips."""

__version__ = "0.3.0"
