"""img2header — embed images in C/C++ headers as compile-time data.

Quantize a decoded RGBA image to a bounded, insertion-ordered palette (or
keep it direct-colour) and serialize it in one of the registered dialects.
Use it from the CLI (``img2header <dialect> <image>``) or import it.
"""

from img2header.conversion import ConversionResult, convert, convert_image, serialize
from img2header.core.identifiers import header_guard, identifier_basis
from img2header.core.quantizer import quantize
from img2header.core.types import (
    ConversionError,
    DirectImage,
    IndexedImage,
    InvalidConfiguration,
    PixelBuffer,
)

__all__ = [
    'ConversionError',
    'ConversionResult',
    'DirectImage',
    'IndexedImage',
    'InvalidConfiguration',
    'PixelBuffer',
    'convert',
    'convert_image',
    'header_guard',
    'identifier_basis',
    'quantize',
    'serialize',
]
