"""Checked array slots, bounded immutable trees, and helpers for locating verification tools and reading a cargo workspace."""

__version__ = "0.1.0"