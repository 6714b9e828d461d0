"""Public API for finding repeated photos."""

from typing import List, Sequence

from .matcher import SimilarPair, find_similar
from .pipeline import process_images
from ..config import Settings
from ..logging import get_logger

logger = get_logger(__name__)


def find_repeated_photos(
    paths: Sequence[str],
    settings: Settings,
    show_progress: bool = False,
) -> List[SimilarPair]:
    """
    Fingerprint ``paths`` and report the pairs that look alike.

    Matching starts only after every fingerprint has been collected.

    Args:
        paths: Image paths supplied by a walker
        settings: Worker budget, threshold and hashing parameters
        show_progress: Display a progress bar while fingerprinting

    Returns:
        SimilarPair list

    Raises:
        ConfigurationError: If settings are invalid; raised before any work
    """
    settings.validate()

    records = process_images(
        paths,
        settings.max_workers,
        canvas_size=settings.canvas_size,
        hash_method=settings.hash_method,
        hash_size=settings.hash_size,
        show_progress=show_progress,
    )

    if len(records) < 2:
        logger.info("Less than 2 images with valid fingerprints, nothing to compare")
        return []

    return find_similar(records, settings.threshold)
