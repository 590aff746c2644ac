"""Structural comparison of JSON values with path-aware difference reports."""

__version__ = "0.2.1"
__all__ = ["config", "diff", "textutil"]