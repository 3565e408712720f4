from __future__ import annotations

"""
Word layout v1 (target point generator)

Turns a word into an ordered point cloud on the z=0 plane:
- one contiguous group of points per letter, letters left to right
- each letter occupies a fixed-width slot; spaces and unknown characters keep
  their slot but contribute no points
- the whole word is centered on x=0, letters are centered on y=0

Output order is the recruitment order, so it must stay stable.
"""

from dataclasses import dataclass
from typing import List, Sequence
import math

from .glyph_atlas_v1 import GlyphPath, GlyphPoint, get_glyph

LETTER_WIDTH = 1.2   # slot width, in units of scale
LETTER_HEIGHT = 1.5  # glyph height, in units of scale


@dataclass(frozen=True)
class WordPoint:
    x: float
    y: float
    z: float
    letter_index: int
    point_index: int


def resample_glyph(path: GlyphPath, count: int) -> List[GlyphPoint]:
    """Sample `count` points along `path` at t=j/count (start-inclusive, end-exclusive).

    Samples interpolate between path[floor(t*n)] and the following vertex
    (clamped to the last one).
    """
    n = len(path)
    count = int(count)
    if n == 0 or count <= 0:
        return []
    out: List[GlyphPoint] = []
    for j in range(count):
        f = (j / count) * n
        i0 = min(int(math.floor(f)), n - 1)
        i1 = min(i0 + 1, n - 1)
        lt = f - math.floor(f)
        x0, y0 = path[i0]
        x1, y1 = path[i1]
        out.append((x0 + (x1 - x0) * lt, y0 + (y1 - y0) * lt))
    return out


def layout_word_points(word: str, particles_per_letter: int = 25, scale: float = 3.5) -> List[WordPoint]:
    """Lay out `word` as target points. Unknown characters are skipped silently."""
    if not word:
        return []
    scale = float(scale)
    letter_w = LETTER_WIDTH * scale
    letter_h = LETTER_HEIGHT * scale
    total_w = len(word) * letter_w
    start_x = -total_w / 2.0 + letter_w / 2.0

    points: List[WordPoint] = []
    for letter_index, ch in enumerate(word):
        glyph = get_glyph(ch)
        if not glyph:
            continue
        offset_x = start_x + letter_index * letter_w
        n = min(int(particles_per_letter), len(glyph) * 2)
        for j, (gx, gy) in enumerate(resample_glyph(glyph, n)):
            points.append(WordPoint(
                x=(gx - 0.5) * scale + offset_x,
                y=(gy - 0.5) * letter_h,
                z=0.0,
                letter_index=letter_index,
                point_index=j,
            ))
    return points


def densify_glyph(path: GlyphPath, target_count: int) -> List[GlyphPoint]:
    """Spread `target_count` points evenly over the path's segments, both ends included.

    Paths that already have enough points are truncated instead.
    """
    n = len(path)
    target_count = int(target_count)
    if n == 0 or target_count <= 0:
        return []
    if n >= target_count:
        return list(path[:target_count])
    if n == 1 or target_count == 1:
        return [path[0]] * target_count

    segments = n - 1
    out: List[GlyphPoint] = []
    for i in range(target_count):
        f = (i / (target_count - 1)) * segments
        seg = min(int(math.floor(f)), segments - 1)
        lt = f - seg
        x0, y0 = path[seg]
        x1, y1 = path[seg + 1]
        out.append((x0 + (x1 - x0) * lt, y0 + (y1 - y0) * lt))
    return out


def glyph_point_count(word: str) -> int:
    """Raw stroke vertices the word's glyphs carry (before resampling)."""
    return sum(len(get_glyph(ch) or ()) for ch in word)


def letter_count(word: str) -> int:
    """Drawable letters (spaces and unknown characters excluded)."""
    return sum(1 for ch in word if get_glyph(ch))


def letter_slots(word: str) -> int:
    """Slot count used as `total_letters` for per-letter progress."""
    return len(word)


def letter_groups(points: Sequence[WordPoint]) -> List[int]:
    """Letter indices in the order their groups appear."""
    seen: List[int] = []
    for p in points:
        if not seen or seen[-1] != p.letter_index:
            seen.append(p.letter_index)
    return seen
