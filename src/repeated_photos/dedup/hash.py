"""Perceptual fingerprint computation for normalized images."""

from __future__ import annotations

from typing import Callable, Dict

import imagehash
from PIL import Image

from .normalize import CANVAS_SIZE, ImageSource, normalize_image
from ..logging import get_logger

logger = get_logger(__name__)

Fingerprint = imagehash.ImageHash

HASH_FUNCTIONS: Dict[str, Callable[..., imagehash.ImageHash]] = {
    "phash": imagehash.phash,
    "dhash": imagehash.dhash,
    "ahash": imagehash.average_hash,
    "whash": imagehash.whash,
}


def fingerprint(
    normalized: Image.Image,
    method: str = "phash",
    hash_size: int = 8,
) -> Fingerprint:
    """
    Compute the perceptual hash of an already normalized image.

    The default DCT hash yields a 64-bit fingerprint. The computation is pure:
    the same canvas always yields the same bits.

    Args:
        normalized: Output of ``normalize_image``
        method: One of ``HASH_FUNCTIONS``
        hash_size: Edge length of the bit grid (``hash_size ** 2`` bits)

    Returns:
        The fingerprint as an ``imagehash.ImageHash``
    """
    try:
        hash_func = HASH_FUNCTIONS[method]
    except KeyError:
        raise ValueError(f"Unknown hash method: {method}") from None
    return hash_func(normalized, hash_size=hash_size)


def fingerprint_file(
    source: ImageSource,
    canvas_size: int = CANVAS_SIZE,
    method: str = "phash",
    hash_size: int = 8,
) -> Fingerprint:
    """Normalize ``source`` and fingerprint it. Decode failures propagate."""
    normalized = normalize_image(source, canvas_size=canvas_size)
    try:
        return fingerprint(normalized, method=method, hash_size=hash_size)
    finally:
        normalized.close()


def fingerprint_to_hex(value: Fingerprint) -> str:
    return str(value)


def fingerprint_from_hex(hex_str: str) -> Fingerprint:
    return imagehash.hex_to_hash(hex_str)
