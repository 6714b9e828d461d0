"""Image normalization ahead of fingerprinting."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Union

from PIL import Image, ImageOps

from ..errors import DecodeError, FilesystemError
from ..logging import get_logger

logger = get_logger(__name__)

CANVAS_SIZE = 64

ImageSource = Union[str, Path, bytes]


def normalize_image(source: ImageSource, canvas_size: int = CANVAS_SIZE) -> Image.Image:
    """
    Decode an image and reduce it to a square luminance canvas.

    The result is a mode "L" image of exactly ``canvas_size`` x ``canvas_size``
    pixels, resampled with a Lanczos filter. Every image must go through the same
    canvas size for their fingerprints to be comparable.

    Args:
        source: Path to an image file, or the raw encoded bytes
        canvas_size: Edge length of the output canvas in pixels

    Returns:
        Normalized PIL image, detached from the source file

    Raises:
        FilesystemError: If the path is missing or cannot be read
        DecodeError: If the data is not a valid or supported image
    """
    label = "<bytes>" if isinstance(source, bytes) else str(source)
    fp = io.BytesIO(source) if isinstance(source, bytes) else Path(source)

    try:
        with Image.open(fp) as img:
            img.load()
            # Rotated copies of the same photo should land on the same canvas
            upright = ImageOps.exif_transpose(img)
            gray = upright.convert("L")
            normalized = gray.resize((canvas_size, canvas_size), Image.Resampling.LANCZOS)
    except (FileNotFoundError, PermissionError, IsADirectoryError) as exc:
        raise FilesystemError(f"Cannot read {label}: {exc}") from exc
    except Exception as exc:
        raise DecodeError(f"Cannot decode {label}: {exc}") from exc

    logger.debug(f"Normalized {label} to {canvas_size}x{canvas_size}")
    return normalized
