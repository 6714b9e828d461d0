"""Perceptual duplicate detection: normalize, fingerprint, match."""

from .normalize import normalize_image, CANVAS_SIZE
from .hash import Fingerprint, fingerprint, fingerprint_file, fingerprint_from_hex, fingerprint_to_hex
from .distance import hamming_distance
from .pipeline import FingerprintRecord, process_images
from .matcher import SimilarPair, find_similar
from .cluster import DuplicateGroup, group_similar
from .model import find_repeated_photos

__all__ = [
    "CANVAS_SIZE",
    "DuplicateGroup",
    "Fingerprint",
    "FingerprintRecord",
    "SimilarPair",
    "find_repeated_photos",
    "find_similar",
    "fingerprint",
    "fingerprint_file",
    "fingerprint_from_hex",
    "fingerprint_to_hex",
    "group_similar",
    "hamming_distance",
    "normalize_image",
    "process_images",
]
