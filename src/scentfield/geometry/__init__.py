"""Tile map geometry: the neighbor enumeration the field consumes."""

from scentfield.geometry.hex import HexCoord, HexDirection, HexMapGeometry
from scentfield.geometry.protocol import MapGeometry

__all__ = [
    # Protocol
    "MapGeometry",
    # Hex implementation
    "HexCoord",
    "HexDirection",
    "HexMapGeometry",
]
