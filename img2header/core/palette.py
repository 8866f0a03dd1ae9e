"""RGBA colour maths: packing, distance and nearest-palette-entry search.

Packed form is 0xRRGGBBAA as an unsigned 32-bit value. Every channel is
treated as an unsigned 8-bit int so packing never sign-extends.
"""

from collections.abc import Sequence

import numpy as np

from img2header.core.types import RGBA


def pack_rgba(color: RGBA) -> int:
    """Pack (r, g, b, a) into an unsigned 32-bit 0xRRGGBBAA int."""
    r, g, b, a = color
    return ((r & 0xFF) << 24) | ((g & 0xFF) << 16) | ((b & 0xFF) << 8) | (a & 0xFF)


def unpack_rgba(value: int) -> RGBA:
    """Inverse of pack_rgba."""
    value &= 0xFFFFFFFF
    return ((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def rgba_distance_sq(a: RGBA, b: RGBA) -> int:
    """Squared Euclidean distance over (R, G, B, A). Plain ints, no uint8 wrap."""
    return sum((int(x) - int(y)) ** 2 for x, y in zip(a, b))


def nearest_index(color: RGBA, palette: Sequence[RGBA]) -> int:
    """Index of the palette entry closest to `color`.

    Scans in palette order and only replaces the best on a strictly smaller
    distance, so ties go to the earliest entry.
    """
    if not palette:
        raise ValueError('Cannot search an empty palette')
    best_idx = 0
    best_dist = rgba_distance_sq(color, palette[0])
    for i in range(1, len(palette)):
        dist = rgba_distance_sq(color, palette[i])
        if dist < best_dist:
            best_idx = i
            best_dist = dist
    return best_idx


def palette_array(palette: Sequence[RGBA]) -> np.ndarray:
    """Palette as an (N, 4) int64 array for vectorized search."""
    return np.array(palette, dtype=np.int64).reshape(-1, 4)


def nearest_index_np(color: RGBA, palette: np.ndarray) -> int:
    """Vectorized nearest_index over a palette_array().

    np.argmin returns the first minimum, which is the same tie-break as the
    linear scan.
    """
    if len(palette) == 0:
        raise ValueError('Cannot search an empty palette')
    diff = palette - np.array(color, dtype=np.int64)
    dists = np.einsum('ij,ij->i', diff, diff)
    return int(np.argmin(dists))
