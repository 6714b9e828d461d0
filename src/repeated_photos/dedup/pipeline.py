"""Parallel fingerprinting of a batch of image paths."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import List, Optional, Sequence

from tqdm import tqdm

from .hash import Fingerprint, fingerprint_file
from .normalize import CANVAS_SIZE
from ..config import require_positive_int, validate_hashing
from ..errors import DecodeError, FilesystemError
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FingerprintRecord:
    """A fingerprint paired with the file it was computed from."""
    fingerprint: Fingerprint
    path: str


def process_images(
    paths: Sequence[str],
    max_workers: int = 10,
    *,
    canvas_size: int = CANVAS_SIZE,
    hash_method: str = "phash",
    hash_size: int = 8,
    show_progress: bool = False,
) -> List[FingerprintRecord]:
    """
    Fingerprint every path on a bounded thread pool.

    Each path is normalized and hashed independently. Items that fail to
    decode or cannot be read are logged and left out of the result; they never
    stop the rest of the batch. Results are aggregated in the calling thread
    once all work has finished.

    Args:
        paths: Image paths to fingerprint
        max_workers: Maximum number of concurrent worker threads
        canvas_size: Edge length of the normalized canvas
        hash_method: Perceptual hash algorithm name
        hash_size: Hash grid edge length
        show_progress: Display a tqdm progress bar

    Returns:
        One FingerprintRecord per successfully processed path, sorted by path

    Raises:
        ConfigurationError: If max_workers or a hashing parameter is invalid;
            raised before any image is opened
    """
    require_positive_int("max_workers", max_workers)
    validate_hashing(canvas_size, hash_method, hash_size)
    if not paths:
        return []

    def process_one(path: str) -> Optional[FingerprintRecord]:
        try:
            value = fingerprint_file(path, canvas_size=canvas_size, method=hash_method, hash_size=hash_size)
        except (DecodeError, FilesystemError) as exc:
            logger.warning(f"Skipping {path}: {exc}")
            return None
        logger.debug(f"Fingerprint {value} for {path}")
        return FingerprintRecord(fingerprint=value, path=path)

    records: List[FingerprintRecord] = []
    failed = 0

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(process_one, str(path)): str(path) for path in paths}
        for future in tqdm(as_completed(futures), total=len(futures),
                           desc="Fingerprinting", unit="images", disable=not show_progress):
            path = futures[future]
            try:
                record = future.result()
            except Exception:
                logger.exception(f"Unexpected failure while fingerprinting {path}")
                record = None

            if record is None:
                failed += 1
            else:
                records.append(record)

    records.sort(key=lambda record: record.path)
    logger.info(f"Fingerprinted {len(records)}/{len(paths)} images ({failed} failed)")
    return records
