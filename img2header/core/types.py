"""Shared types for img2header: PixelBuffer, Palette, IndexedImage, DirectImage, Dialect."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Union

RGBA = tuple[int, int, int, int]


class ConversionError(Exception):
    """Base error for anything img2header reports back to the caller."""


class InvalidConfiguration(ConversionError):
    """Bad colour limit, unknown dialect or strategy, malformed settings."""


@dataclass(frozen=True)
class PixelBuffer:
    """Decoded image: width x height RGBA pixels in row-major order."""

    width: int
    height: int
    pixels: tuple[RGBA, ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ConversionError(f'Negative image size: {self.width}x{self.height}')
        if len(self.pixels) != self.width * self.height:
            raise ConversionError(
                f'Pixel count {len(self.pixels)} does not match {self.width}x{self.height}'
            )
        for px in self.pixels:
            if len(px) != 4 or any(not 0 <= c <= 255 for c in px):
                raise ConversionError(f'Not an 8-bit RGBA pixel: {px!r}')

    def __len__(self) -> int:
        return len(self.pixels)


class Palette:
    """Insertion-ordered set of distinct colours, capped at `limit` entries.

    The colour list and the colour -> index table are always updated together,
    so `colors[index_of(c)] == c` for every stored colour.
    """

    def __init__(self, limit: int):
        self.limit = limit
        self.colors: list[RGBA] = []
        self._lookup: dict[RGBA, int] = {}

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[RGBA]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> RGBA:
        return self.colors[index]

    @property
    def full(self) -> bool:
        return len(self.colors) >= self.limit

    def index_of(self, color: RGBA) -> int | None:
        return self._lookup.get(color)

    def add(self, color: RGBA) -> int:
        """Append a new colour and return its index."""
        if color in self._lookup:
            raise ConversionError(f'Colour {color!r} is already in the palette')
        if self.full:
            raise ConversionError(f'Palette is full ({self.limit} colours)')
        index = len(self.colors)
        self.colors.append(color)
        self._lookup[color] = index
        return index


@dataclass(frozen=True)
class IndexedImage:
    """Palette plus one palette index per pixel."""

    width: int
    height: int
    palette: tuple[RGBA, ...]
    indices: tuple[int, ...]
    overflow_pixels: int = 0  # pixels assigned by nearest match, not exact match

    @property
    def indexed(self) -> bool:
        return True


@dataclass(frozen=True)
class DirectImage:
    """Raw per-pixel colours, no palette."""

    width: int
    height: int
    pixels: tuple[RGBA, ...]

    @property
    def indexed(self) -> bool:
        return False


QuantizedImage = Union[IndexedImage, DirectImage]


class Dialect:
    """A self-registering output dialect.

    Usage in a dialect module:

        dialect = Dialect(name='plain-array', help='Flat C arrays', suffix='.h')

        @dialect.render
        def render(image, basis):
            ...
    """

    def __init__(self, name: str, help: str = '', suffix: str = '.h'):
        self.name = name
        self.help = help
        self.suffix = suffix
        self._render_fn: Callable[[QuantizedImage, str], str] | None = None

    def render(self, fn: Callable[[QuantizedImage, str], str]) -> Callable[[QuantizedImage, str], str]:
        """Decorator to register the render function."""
        self._render_fn = fn
        return fn

    def serialize(self, image: QuantizedImage, basis: str) -> str:
        """Render the image as header text."""
        if self._render_fn is None:
            raise RuntimeError(f'Dialect {self.name} has no render function')
        return self._render_fn(image, basis)

    def output_name(self, stem: str) -> str:
        return f'{stem}{self.suffix}'


@dataclass
class ConversionReport:
    """Summary of one conversion for text/JSON output."""

    source: str = ''
    width: int = 0
    height: int = 0
    dialect: str = ''
    indexed: bool = True
    color_limit: int | None = None
    palette_size: int = 0
    overflow_pixels: int = 0
    identifier: str = ''
    output_path: str | None = None
