from __future__ import annotations

"""
Glyph atlas v1

Static stroke paths for A-Z and space. Each path is an ordered tuple of (x, y)
points in the unit square, y pointing up. The layout resamples along the
path order, so the order of points is part of the glyph.
"""

from typing import Dict, Optional, Tuple

GlyphPoint = Tuple[float, float]
GlyphPath = Tuple[GlyphPoint, ...]


GLYPH_DATA: Dict[str, GlyphPath] = {
    "A": (
        (0.1, 0), (0.15, 0.2), (0.2, 0.4), (0.25, 0.6), (0.3, 0.8), (0.35, 0.9),
        (0.4, 0.95), (0.45, 1), (0.5, 1), (0.55, 1), (0.6, 0.95), (0.65, 0.9),
        (0.7, 0.8), (0.75, 0.6), (0.8, 0.4), (0.85, 0.2), (0.9, 0), (0.25, 0.35),
        (0.35, 0.35), (0.45, 0.35), (0.55, 0.35), (0.65, 0.35), (0.75, 0.35),
    ),
    "B": (
        (0.2, 0), (0.2, 0.15), (0.2, 0.3), (0.2, 0.45), (0.2, 0.5), (0.2, 0.6),
        (0.2, 0.75), (0.2, 0.9), (0.2, 1), (0.3, 1), (0.45, 1), (0.6, 0.95),
        (0.7, 0.85), (0.7, 0.7), (0.6, 0.55), (0.45, 0.5), (0.3, 0.5), (0.3, 0.5),
        (0.5, 0.5), (0.65, 0.45), (0.75, 0.35), (0.75, 0.2), (0.65, 0.08), (0.5, 0),
        (0.3, 0),
    ),
    "C": (
        (0.8, 0.2), (0.7, 0.08), (0.55, 0), (0.4, 0), (0.25, 0.08), (0.15, 0.2),
        (0.1, 0.35), (0.1, 0.5), (0.1, 0.65), (0.15, 0.8), (0.25, 0.92), (0.4, 1),
        (0.55, 1), (0.7, 0.92), (0.8, 0.8),
    ),
    "D": (
        (0.2, 0), (0.2, 0.15), (0.2, 0.3), (0.2, 0.5), (0.2, 0.7), (0.2, 0.85),
        (0.2, 1), (0.35, 1), (0.5, 1), (0.65, 0.95), (0.75, 0.85), (0.8, 0.7),
        (0.8, 0.5), (0.8, 0.3), (0.75, 0.15), (0.65, 0.05), (0.5, 0), (0.35, 0),
    ),
    "E": (
        (0.2, 0), (0.2, 0.2), (0.2, 0.4), (0.2, 0.5), (0.2, 0.6), (0.2, 0.8),
        (0.2, 1), (0.35, 1), (0.5, 1), (0.65, 1), (0.8, 1), (0.35, 0.5),
        (0.5, 0.5), (0.65, 0.5), (0.35, 0), (0.5, 0), (0.65, 0), (0.8, 0),
    ),
    "F": (
        (0.2, 0), (0.2, 0.2), (0.2, 0.4), (0.2, 0.5), (0.2, 0.6), (0.2, 0.8),
        (0.2, 1), (0.35, 1), (0.5, 1), (0.65, 1), (0.8, 1), (0.35, 0.5),
        (0.5, 0.5), (0.65, 0.5),
    ),
    "G": (
        (0.8, 0.8), (0.7, 0.92), (0.55, 1), (0.4, 1), (0.25, 0.92), (0.15, 0.8),
        (0.1, 0.65), (0.1, 0.5), (0.1, 0.35), (0.15, 0.2), (0.25, 0.08), (0.4, 0),
        (0.55, 0), (0.7, 0.08), (0.8, 0.2), (0.8, 0.35), (0.8, 0.45), (0.65, 0.45),
        (0.5, 0.45),
    ),
    "H": (
        (0.2, 0), (0.2, 0.2), (0.2, 0.4), (0.2, 0.5), (0.2, 0.6), (0.2, 0.8),
        (0.2, 1), (0.8, 0), (0.8, 0.2), (0.8, 0.4), (0.8, 0.5), (0.8, 0.6),
        (0.8, 0.8), (0.8, 1), (0.35, 0.5), (0.5, 0.5), (0.65, 0.5),
    ),
    "I": (
        (0.5, 0), (0.5, 0.15), (0.5, 0.3), (0.5, 0.45), (0.5, 0.6), (0.5, 0.75),
        (0.5, 0.9), (0.5, 1), (0.3, 1), (0.4, 1), (0.6, 1), (0.7, 1),
        (0.3, 0), (0.4, 0), (0.6, 0), (0.7, 0),
    ),
    "J": (
        (0.2, 0.15), (0.3, 0.05), (0.45, 0), (0.55, 0.05), (0.6, 0.15), (0.6, 0.3),
        (0.6, 0.45), (0.6, 0.6), (0.6, 0.75), (0.6, 0.9), (0.6, 1), (0.4, 1),
        (0.5, 1), (0.7, 1), (0.8, 1),
    ),
    "K": (
        (0.2, 0), (0.2, 0.2), (0.2, 0.4), (0.2, 0.5), (0.2, 0.6), (0.2, 0.8),
        (0.2, 1), (0.3, 0.5), (0.4, 0.6), (0.5, 0.7), (0.6, 0.8), (0.7, 0.9),
        (0.8, 1), (0.3, 0.5), (0.4, 0.4), (0.5, 0.3), (0.6, 0.2), (0.7, 0.1),
        (0.8, 0),
    ),
    "L": (
        (0.2, 0), (0.2, 0.2), (0.2, 0.4), (0.2, 0.6), (0.2, 0.8), (0.2, 1),
        (0.35, 0), (0.5, 0), (0.65, 0), (0.8, 0),
    ),
    "M": (
        (0.1, 0), (0.1, 0.2), (0.1, 0.4), (0.1, 0.6), (0.1, 0.8), (0.1, 1),
        (0.2, 0.85), (0.3, 0.65), (0.4, 0.45), (0.5, 0.3), (0.5, 0.3), (0.6, 0.45),
        (0.7, 0.65), (0.8, 0.85), (0.9, 1), (0.9, 0.8), (0.9, 0.6), (0.9, 0.4),
        (0.9, 0.2), (0.9, 0),
    ),
    "N": (
        (0.2, 0), (0.2, 0.2), (0.2, 0.4), (0.2, 0.6), (0.2, 0.8), (0.2, 1),
        (0.3, 0.85), (0.4, 0.65), (0.5, 0.45), (0.6, 0.25), (0.7, 0.1), (0.8, 0),
        (0.8, 0.2), (0.8, 0.4), (0.8, 0.6), (0.8, 0.8), (0.8, 1),
    ),
    "O": (
        (0.5, 0), (0.35, 0.05), (0.22, 0.15), (0.12, 0.3), (0.1, 0.5), (0.12, 0.7),
        (0.22, 0.85), (0.35, 0.95), (0.5, 1), (0.65, 0.95), (0.78, 0.85), (0.88, 0.7),
        (0.9, 0.5), (0.88, 0.3), (0.78, 0.15), (0.65, 0.05),
    ),
    "P": (
        (0.2, 0), (0.2, 0.2), (0.2, 0.4), (0.2, 0.5), (0.2, 0.6), (0.2, 0.8),
        (0.2, 1), (0.35, 1), (0.5, 1), (0.65, 0.95), (0.75, 0.85), (0.8, 0.72),
        (0.75, 0.58), (0.65, 0.5), (0.5, 0.5), (0.35, 0.5),
    ),
    "Q": (
        (0.5, 0.05), (0.35, 0.1), (0.22, 0.2), (0.12, 0.35), (0.1, 0.5), (0.12, 0.65),
        (0.22, 0.8), (0.35, 0.9), (0.5, 0.95), (0.65, 0.9), (0.78, 0.8), (0.88, 0.65),
        (0.9, 0.5), (0.88, 0.35), (0.78, 0.2), (0.65, 0.1), (0.6, 0.2), (0.7, 0.1),
        (0.8, 0), (0.9, 0),
    ),
    "R": (
        (0.2, 0), (0.2, 0.2), (0.2, 0.4), (0.2, 0.5), (0.2, 0.6), (0.2, 0.8),
        (0.2, 1), (0.35, 1), (0.5, 1), (0.65, 0.95), (0.75, 0.85), (0.8, 0.72),
        (0.75, 0.58), (0.65, 0.5), (0.5, 0.5), (0.35, 0.5), (0.4, 0.45), (0.5, 0.35),
        (0.6, 0.25), (0.7, 0.12), (0.8, 0),
    ),
    "S": (
        (0.75, 0.85), (0.65, 0.95), (0.5, 1), (0.35, 0.95), (0.22, 0.85), (0.18, 0.72),
        (0.22, 0.6), (0.35, 0.52), (0.5, 0.5), (0.65, 0.48), (0.78, 0.4), (0.82, 0.28),
        (0.78, 0.15), (0.65, 0.05), (0.5, 0), (0.35, 0.05), (0.25, 0.15),
    ),
    "T": (
        (0.5, 0), (0.5, 0.15), (0.5, 0.3), (0.5, 0.45), (0.5, 0.6), (0.5, 0.75),
        (0.5, 0.9), (0.5, 1), (0.15, 1), (0.25, 1), (0.35, 1), (0.65, 1),
        (0.75, 1), (0.85, 1),
    ),
    "U": (
        (0.2, 1), (0.2, 0.8), (0.2, 0.6), (0.2, 0.4), (0.2, 0.25), (0.25, 0.12),
        (0.35, 0.03), (0.5, 0), (0.65, 0.03), (0.75, 0.12), (0.8, 0.25), (0.8, 0.4),
        (0.8, 0.6), (0.8, 0.8), (0.8, 1),
    ),
    "V": (
        (0.1, 1), (0.2, 0.8), (0.3, 0.6), (0.4, 0.4), (0.5, 0.15), (0.5, 0),
        (0.5, 0.15), (0.6, 0.4), (0.7, 0.6), (0.8, 0.8), (0.9, 1),
    ),
    "W": (
        (0.05, 1), (0.1, 0.8), (0.15, 0.5), (0.2, 0.25), (0.25, 0), (0.3, 0.25),
        (0.35, 0.5), (0.4, 0.7), (0.5, 0.8), (0.55, 0.7), (0.6, 0.5), (0.7, 0.25),
        (0.75, 0), (0.8, 0.25), (0.85, 0.5), (0.9, 0.8), (0.95, 1),
    ),
    "X": (
        (0.15, 1), (0.25, 0.85), (0.35, 0.7), (0.5, 0.5), (0.65, 0.3), (0.75, 0.15),
        (0.85, 0), (0.85, 1), (0.75, 0.85), (0.65, 0.7), (0.5, 0.5), (0.35, 0.3),
        (0.25, 0.15), (0.15, 0),
    ),
    "Y": (
        (0.15, 1), (0.25, 0.85), (0.35, 0.7), (0.5, 0.5), (0.85, 1), (0.75, 0.85),
        (0.65, 0.7), (0.5, 0.5), (0.5, 0.4), (0.5, 0.3), (0.5, 0.2), (0.5, 0.1),
        (0.5, 0),
    ),
    "Z": (
        (0.2, 1), (0.35, 1), (0.5, 1), (0.65, 1), (0.8, 1), (0.75, 0.85),
        (0.65, 0.7), (0.55, 0.55), (0.45, 0.4), (0.35, 0.25), (0.25, 0.1), (0.2, 0),
        (0.35, 0), (0.5, 0), (0.65, 0), (0.8, 0),
    ),
    " ": (),
}


def get_glyph(ch: str) -> Optional[GlyphPath]:
    """Return the path for a single character (case-insensitive), None if unknown."""
    if not isinstance(ch, str) or len(ch) != 1:
        return None
    return GLYPH_DATA.get(ch.upper())
