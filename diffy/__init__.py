"""
diffy: minimum-cost sequence alignment for side-by-side diffs.

This package provides:
- A generic edit-distance engine over any sequences of comparable items, returning
  both the distance and an explicit alignment (matching, different, left-only and
  right-only links)
- A fingerprint sketch that estimates line similarity quickly, so lines can be
  aligned when they are merely similar rather than equal
- A realignment pass that turns weak line pairings into readable delete/insert runs
- Thin collaborators for reading text files, loading JSON/YAML configuration,
  reporting and a command line interface

The core is pure and synchronous: no file I/O, no global state.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
