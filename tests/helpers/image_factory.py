"""Synthetic photo-like images for fingerprinting tests."""

import io
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw


def make_photo(seed: int, size: tuple[int, int] = (320, 240)) -> Image.Image:
    """
    Build a deterministic RGB "scene" from ``seed``.

    A smooth gradient background with a handful of large shapes, so that
    different seeds give structurally different images while resizing and
    recompression leave the low frequencies intact.
    """
    rng = np.random.default_rng(seed)
    width, height = size

    yy, xx = np.mgrid[0:height, 0:width]
    angle = rng.uniform(0, 2 * np.pi)
    ramp = np.cos(angle) * xx / width + np.sin(angle) * yy / height
    ramp = (ramp - ramp.min()) / (np.ptp(ramp) or 1.0)

    channels = []
    for _ in range(3):
        low, high = sorted(rng.integers(0, 256, size=2))
        channels.append(low + ramp * (high - low))
    background = np.stack(channels, axis=-1).astype(np.uint8)

    img = Image.fromarray(background)
    draw = ImageDraw.Draw(img)
    for _ in range(12):
        x0 = int(rng.integers(0, width * 3 // 4))
        y0 = int(rng.integers(0, height * 3 // 4))
        x1 = x0 + int(rng.integers(width // 8, width // 2))
        y1 = y0 + int(rng.integers(height // 8, height // 2))
        color = tuple(int(c) for c in rng.integers(0, 256, size=3))
        if rng.random() < 0.5:
            draw.ellipse([x0, y0, x1, y1], fill=color)
        else:
            draw.rectangle([x0, y0, x1, y1], fill=color)
    return img


def save_photo(path: Path, seed: int, size: tuple[int, int] = (320, 240), **save_kwargs) -> Path:
    """Render ``make_photo(seed, size)`` to ``path``; the format follows the extension."""
    img = make_photo(seed, size)
    img.save(path, **save_kwargs)
    return path


def save_variant(path: Path, seed: int, scale: float = 0.5, quality: int = 60) -> Path:
    """Save a downscaled, recompressed JPEG copy of the scene for ``seed``."""
    img = make_photo(seed)
    width, height = img.size
    small = img.resize((int(width * scale), int(height * scale)), Image.Resampling.LANCZOS)
    small.save(path, format="JPEG", quality=quality)
    return path


def truncated_jpeg_bytes(seed: int = 0) -> bytes:
    """JPEG data cut in half: the header parses but the pixel data is incomplete."""
    buffer = io.BytesIO()
    make_photo(seed).save(buffer, format="JPEG", quality=90)
    data = buffer.getvalue()
    return data[: len(data) // 2]
