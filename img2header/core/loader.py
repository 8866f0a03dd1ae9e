"""Image decoding boundary: Pillow images and raw RGBA bytes to PixelBuffer."""

import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from img2header.core.types import ConversionError, PixelBuffer


def pixels_from_array(arr: np.ndarray) -> PixelBuffer:
    """(H, W, 4) uint8 array to PixelBuffer."""
    if arr.ndim != 3 or arr.shape[2] != 4:
        raise ConversionError(f'Expected an (H, W, 4) RGBA array, got shape {arr.shape}')
    height, width = int(arr.shape[0]), int(arr.shape[1])
    # tolist() yields plain Python ints, never numpy uint8
    flat = arr.astype(np.uint8).reshape(-1, 4).tolist()
    return PixelBuffer(width=width, height=height, pixels=tuple(tuple(px) for px in flat))


def pixels_from_image(image: Image.Image) -> PixelBuffer:
    """Any Pillow mode to an RGBA PixelBuffer."""
    rgba = image.convert('RGBA')
    arr = np.asarray(rgba, dtype=np.uint8).reshape(rgba.height, rgba.width, 4)
    return pixels_from_array(arr)


def pixels_from_bytes(width: int, height: int, data: bytes) -> PixelBuffer:
    """Raw row-major RGBA bytes (4 per pixel) to PixelBuffer."""
    if len(data) != width * height * 4:
        raise ConversionError(f'Expected {width * height * 4} bytes for {width}x{height} RGBA, got {len(data)}')
    arr = np.frombuffer(data, dtype=np.uint8).reshape(height, width, 4)
    return pixels_from_array(arr)


def load_image(path: str) -> Image.Image:
    """Open and fully decode an image file."""
    if not os.path.isfile(path):
        raise ConversionError(f'image not found: {path}')
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (UnidentifiedImageError, OSError) as e:
        raise ConversionError(f'cannot decode image {path}: {e}') from e
