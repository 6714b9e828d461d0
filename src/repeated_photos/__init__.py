"""Find near-duplicate photos by perceptual fingerprinting."""

from .config import Settings
from .errors import ConfigurationError, DecodeError, FilesystemError, RepeatedPhotosError
from .dedup import (
    DuplicateGroup,
    FingerprintRecord,
    SimilarPair,
    find_repeated_photos,
    find_similar,
    fingerprint,
    group_similar,
    hamming_distance,
    normalize_image,
    process_images,
)
from .scan import find_images
from .relocate import RelocationResult, relocate_duplicates

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "DuplicateGroup",
    "FilesystemError",
    "FingerprintRecord",
    "RelocationResult",
    "RepeatedPhotosError",
    "Settings",
    "SimilarPair",
    "find_images",
    "find_repeated_photos",
    "find_similar",
    "fingerprint",
    "group_similar",
    "hamming_distance",
    "normalize_image",
    "process_images",
    "relocate_duplicates",
]
