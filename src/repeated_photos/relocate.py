"""Copying (or moving) matched images into a review directory."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .dedup.matcher import SimilarPair
from .logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RelocationResult:
    source: str
    destination: Optional[str]
    success: bool
    error: Optional[str] = None


def unique_destination(target_dir: Path, file_name: str) -> Path:
    """Return ``target_dir / file_name``, or ``<stem>_<n><suffix>`` if that is taken."""
    candidate = target_dir / file_name
    if not candidate.exists():
        return candidate

    stem = candidate.stem
    suffix = candidate.suffix
    counter = 1
    while True:
        candidate = target_dir / f"{stem}_{counter}{suffix}"
        if not candidate.exists():
            return candidate
        counter += 1


def relocate_duplicates(
    pairs: Sequence[SimilarPair],
    target_dir: Path,
    move: bool = False,
) -> List[RelocationResult]:
    """
    Place every image involved in a similar pair into ``target_dir``.

    Each distinct source path is handled once even if it appears in several
    pairs. By default files are copied and the originals stay where they are;
    ``move=True`` moves them instead. A failed copy is reported in its result
    and does not stop the others.

    Args:
        pairs: Output of ``find_similar``
        target_dir: Destination directory, created if needed
        move: Move instead of copy

    Returns:
        One RelocationResult per distinct source path
    """
    target_dir = Path(target_dir)
    target_dir.mkdir(parents=True, exist_ok=True)

    sources: List[str] = []
    seen = set()
    for pair in pairs:
        for path in (pair.path_a, pair.path_b):
            if path not in seen:
                seen.add(path)
                sources.append(path)

    action = "Moved" if move else "Copied"
    results: List[RelocationResult] = []
    for source in sources:
        destination = unique_destination(target_dir, Path(source).name)
        try:
            if move:
                shutil.move(source, destination)
            else:
                shutil.copy2(source, destination)
        except OSError as exc:
            logger.error(f"Failed to relocate {source}: {exc}")
            results.append(RelocationResult(source=source, destination=None, success=False, error=str(exc)))
            continue

        logger.info(f"{action}: {source} -> {destination}")
        results.append(RelocationResult(source=source, destination=str(destination), success=True))

    return results
