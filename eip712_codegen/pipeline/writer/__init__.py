"""
Writer module.

Writes generated output to disk; kept outside the generation core.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter

__all__ = ["AtomicWriter"]
