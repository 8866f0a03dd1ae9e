"""Conversion entry points: quantize, then serialize with a dialect.

Both steps are pure: identical inputs always give byte-identical text.
Invalid configuration is rejected before any pixel is touched.
"""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from img2header import registry
from img2header.core.env import Settings
from img2header.core.identifiers import identifier_basis, output_stem, sanitize_symbol
from img2header.core.loader import pixels_from_image
from img2header.core.quantizer import check_color_limit, quantize
from img2header.core.types import Dialect, PixelBuffer, QuantizedImage


@dataclass(frozen=True)
class ConversionResult:
    """Header text plus what produced it."""

    text: str
    image: QuantizedImage
    dialect: Dialect
    identifier: str
    file_name: str  # suggested output file name, e.g. sprite_img.h


def _resolve_dialect(dialect: str | Dialect) -> Dialect:
    if isinstance(dialect, Dialect):
        return dialect
    return registry.get(dialect)


def serialize(image: QuantizedImage, identifier_basis: str, dialect: str | Dialect) -> str:
    """Render a quantized image as header text in the given dialect."""
    return _resolve_dialect(dialect).serialize(image, identifier_basis)


def convert(
    pixels: PixelBuffer,
    color_limit: int,
    indexed: bool,
    dialect: str | Dialect,
    identifier_basis: str,
    nearest: str = 'linear',
) -> str:
    """(pixels, colour limit, indexed, dialect, identifier basis) -> header text."""
    resolved = _resolve_dialect(dialect)
    if indexed:
        check_color_limit(color_limit)
    image = quantize(pixels, color_limit, indexed, nearest=nearest)
    return resolved.serialize(image, identifier_basis)


def convert_image(
    image: Image.Image,
    file_name: str,
    color_limit: int | None = None,
    indexed: bool = True,
    dialect: str | Dialect | None = None,
    name: str | None = None,
    nearest: str | None = None,
) -> ConversionResult:
    """Convert a decoded Pillow image.

    `file_name` supplies the identifier basis and the output file stem;
    `name` overrides the basis. Unset options fall back to Settings.from_environ().
    """
    if color_limit is None or dialect is None or nearest is None:
        settings = Settings.from_environ()
        color_limit = settings.colors if color_limit is None else color_limit
        dialect = settings.dialect if dialect is None else dialect
        nearest = settings.nearest if nearest is None else nearest

    resolved = _resolve_dialect(dialect)
    if indexed:
        check_color_limit(color_limit)
    basis = sanitize_symbol(name) if name is not None else identifier_basis(file_name)

    quantized = quantize(pixels_from_image(image), color_limit, indexed, nearest=nearest)
    return ConversionResult(
        text=resolved.serialize(quantized, basis),
        image=quantized,
        dialect=resolved,
        identifier=basis,
        file_name=resolved.output_name(output_stem(file_name)),
    )
