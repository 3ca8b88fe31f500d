"""Core type definitions for scentfield."""

from collections.abc import Hashable
from typing import TypeAlias

TilePos: TypeAlias = Hashable
"""Opaque grid coordinate.

The field only hashes and compares positions for equality. Neighbor
enumeration is delegated to a MapGeometry; see scentfield.geometry.hex.HexCoord
for the bundled hexagonal coordinate.
"""
