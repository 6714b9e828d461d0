"""All-pairs similarity matching over a fingerprint collection."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Sequence

from .distance import hamming_distance
from .pipeline import FingerprintRecord
from ..config import require_non_negative_int
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SimilarPair:
    """Two distinct images whose fingerprints are within the threshold."""
    path_a: str
    path_b: str
    distance: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def find_similar(records: Sequence[FingerprintRecord], threshold: int = 10) -> List[SimilarPair]:
    """
    Report every unordered pair of records within ``threshold`` bits.

    Every pair (i, j) with i < j in input order is evaluated exactly once, so
    the cost is quadratic in the number of records. That is fine for a
    personal photo collection; a much larger corpus would want a bucketed
    nearest-neighbour index behind this same function.

    Args:
        records: Fingerprinted images; left unmodified
        threshold: Maximum Hamming distance; 0 means hash-identical

    Returns:
        SimilarPair list in enumeration order

    Raises:
        ConfigurationError: If threshold is negative or not an integer
    """
    require_non_negative_int("threshold", threshold)

    # A path listed twice is still one image
    unique: List[FingerprintRecord] = []
    seen = set()
    for record in records:
        if record.path in seen:
            logger.debug(f"Ignoring repeated record for {record.path}")
            continue
        seen.add(record.path)
        unique.append(record)

    pairs: List[SimilarPair] = []
    n = len(unique)
    for i in range(n):
        for j in range(i + 1, n):
            record_i = unique[i]
            record_j = unique[j]
            distance = hamming_distance(record_i.fingerprint, record_j.fingerprint)
            if distance <= threshold:
                pairs.append(SimilarPair(path_a=record_i.path, path_b=record_j.path, distance=distance))
                logger.debug(f"Matched {record_i.path} and {record_j.path} (distance: {distance})")

    logger.info(f"Compared {n * (n - 1) // 2} pairs, found {len(pairs)} within distance {threshold}")
    return pairs
