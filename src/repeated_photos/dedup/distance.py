"""Distance metric between fingerprints."""

import imagehash


def hamming_distance(a: imagehash.ImageHash, b: imagehash.ImageHash) -> int:
    """
    Calculate Hamming distance between two perceptual hashes.

    Args:
        a: First hash
        b: Second hash

    Returns:
        Hamming distance (number of differing bits)

    Raises:
        ValueError: If the hashes have different lengths
    """
    if a.hash.shape != b.hash.shape:
        raise ValueError(
            f"Cannot compare fingerprints of different sizes: {a.hash.shape} vs {b.hash.shape}"
        )
    return int(a - b)
