"""Directory walking and image-extension filtering."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional

from .config import DEFAULT_EXTENSIONS, normalize_extensions
from .errors import FilesystemError
from .logging import get_logger

logger = get_logger(__name__)


def _extension(path: Path) -> str:
    return path.suffix.lower().lstrip(".")


def is_image_path(path: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> bool:
    """Return True if ``path`` carries one of the accepted extensions (case-insensitive)."""
    return _extension(path) in normalize_extensions(extensions)


def find_images(
    root: Path | str,
    extensions: Optional[Iterable[str]] = None,
    exclude: Optional[Iterable[Path | str]] = None,
) -> List[str]:
    """
    Recursively collect image files below ``root``.

    Directories that cannot be listed are logged and skipped. Directories in
    ``exclude`` are not descended into, so a review directory placed inside the
    source tree never feeds its copies back into the next scan.

    Args:
        root: Directory to walk
        extensions: Accepted extensions, without dots; defaults to DEFAULT_EXTENSIONS
        exclude: Directories to leave out of the walk

    Returns:
        Sorted absolute path strings

    Raises:
        FilesystemError: If ``root`` does not exist or is not a directory
    """
    root_path = Path(root).resolve()
    if not root_path.is_dir():
        raise FilesystemError(f"Source directory does not exist: {root_path}")

    accepted = normalize_extensions(extensions if extensions is not None else DEFAULT_EXTENSIONS)
    excluded = {Path(path).resolve() for path in exclude or ()}

    def on_error(exc: OSError) -> None:
        logger.warning(f"Skipping unreadable directory {exc.filename}: {exc.strerror}")

    images: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=on_error):
        current = Path(dirpath)
        if current in excluded:
            logger.info(f"Skipping excluded directory {current}")
            dirnames[:] = []
            continue
        # Pruned in place so os.walk does not descend
        dirnames[:] = [name for name in dirnames if (current / name) not in excluded]
        for filename in filenames:
            path = current / filename
            if _extension(path) in accepted and path.is_file():
                images.append(str(path))

    images.sort()
    logger.info(f"Found {len(images)} images under {root_path}")
    return images
