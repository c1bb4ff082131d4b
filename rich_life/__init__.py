"""Rich Life dashboard: snapshot-driven personal finance analytics."""

__version__ = "0.3.0"
