"""
Nonogram (picture logic puzzle) game.

- ``nonogram.model``: puzzle data, XML reader, layout, pointer interaction
  and the abstract draw sequence (no Qt).
- ``nonogram.app``: the PySide6 application around it.
"""

__version__ = "0.1.0"
