"""Greedy palette quantizer.

The first `color_limit` distinct colours met in row-major order become the
palette, in that order. Every later new colour is mapped to its nearest
palette entry (squared RGBA distance, earliest entry wins a tie).
No histogram pass, no median-cut: the output is simple and deterministic.
"""

from collections.abc import Callable

from img2header.core.palette import nearest_index, nearest_index_np, palette_array
from img2header.core.types import (
    RGBA,
    DirectImage,
    IndexedImage,
    InvalidConfiguration,
    Palette,
    PixelBuffer,
    QuantizedImage,
)

NEAREST_STRATEGIES = ('linear', 'numpy')


def check_color_limit(color_limit: object) -> int:
    """Validate a colour limit for indexed mode. Returns it as an int."""
    if isinstance(color_limit, bool) or not isinstance(color_limit, int):
        raise InvalidConfiguration(f'Colour limit must be an integer, got {color_limit!r}')
    if color_limit < 1:
        raise InvalidConfiguration(f'Colour limit must be at least 1, got {color_limit}')
    return color_limit


def _nearest_finder(palette: Palette, strategy: str) -> Callable[[RGBA], int]:
    # Only called once the palette is full, so it no longer changes.
    if strategy == 'numpy':
        arr = palette_array(palette.colors)
        return lambda color: nearest_index_np(color, arr)
    colors = list(palette.colors)
    return lambda color: nearest_index(color, colors)


def quantize(
    pixels: PixelBuffer,
    color_limit: int,
    indexed: bool,
    nearest: str = 'linear',
) -> QuantizedImage:
    """Reduce `pixels` to an IndexedImage, or copy them into a DirectImage.

    In direct mode `color_limit` is ignored entirely.
    """
    if not indexed:
        return DirectImage(width=pixels.width, height=pixels.height, pixels=tuple(pixels.pixels))

    limit = check_color_limit(color_limit)
    if nearest not in NEAREST_STRATEGIES:
        raise InvalidConfiguration(
            f'Unknown nearest-colour strategy: {nearest}. Available: {", ".join(NEAREST_STRATEGIES)}'
        )

    palette = Palette(limit)
    indices: list[int] = []
    find_nearest: Callable[[RGBA], int] | None = None
    overflow_cache: dict[RGBA, int] = {}
    overflow = 0

    for color in pixels.pixels:
        idx = palette.index_of(color)
        if idx is None:
            if not palette.full:
                idx = palette.add(color)
            else:
                if find_nearest is None:
                    find_nearest = _nearest_finder(palette, nearest)
                idx = overflow_cache.get(color)
                if idx is None:
                    idx = find_nearest(color)
                    overflow_cache[color] = idx
                overflow += 1
        indices.append(idx)

    return IndexedImage(
        width=pixels.width,
        height=pixels.height,
        palette=tuple(palette.colors),
        indices=tuple(indices),
        overflow_pixels=overflow,
    )
