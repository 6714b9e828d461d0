from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable

from .errors import ConfigurationError

DEFAULT_EXTENSIONS: FrozenSet[str] = frozenset(
    {"jpg", "jpeg", "png", "gif", "bmp", "tiff", "tif"}
)
HASH_METHODS = ("phash", "dhash", "ahash", "whash")


def normalize_extensions(extensions: Iterable[str]) -> FrozenSet[str]:
    """Lowercase extensions and strip any leading dot."""
    return frozenset(ext.lower().lstrip(".") for ext in extensions if ext.strip("."))


def require_positive_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    return value


def require_non_negative_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def validate_hashing(canvas_size: object, hash_method: object, hash_size: object) -> None:
    """
    Check the parameters that shape a fingerprint.

    Raises:
        ConfigurationError: If any of them is invalid
    """
    require_positive_int("canvas_size", canvas_size)
    require_positive_int("hash_size", hash_size)
    if hash_size < 2:
        raise ConfigurationError(f"hash_size must be at least 2, got {hash_size}")
    if hash_method not in HASH_METHODS:
        raise ConfigurationError(
            f"Unknown hash_method {hash_method!r}; expected one of {', '.join(HASH_METHODS)}"
        )
    if hash_method == "whash" and hash_size & (hash_size - 1):
        raise ConfigurationError(f"whash requires a power-of-two hash_size, got {hash_size}")


@dataclass
class Settings:
    source_dir: Path = Path(".")
    target_dir: Path = Path("duplicates")
    max_workers: int = 10
    threshold: int = 10
    canvas_size: int = 64
    hash_method: str = "phash"
    hash_size: int = 8
    extensions: FrozenSet[str] = field(default_factory=lambda: DEFAULT_EXTENSIONS)

    def __post_init__(self) -> None:
        self.source_dir = Path(self.source_dir)
        self.target_dir = Path(self.target_dir)
        self.extensions = normalize_extensions(self.extensions)

    def validate(self) -> "Settings":
        """
        Check every tunable before any processing begins.

        Raises:
            ConfigurationError: On the first invalid value found.
        """
        require_positive_int("max_workers", self.max_workers)
        require_non_negative_int("threshold", self.threshold)
        validate_hashing(self.canvas_size, self.hash_method, self.hash_size)
        if not self.extensions:
            raise ConfigurationError("extensions must not be empty")
        return self
