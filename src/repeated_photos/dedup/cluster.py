"""Grouping of similar pairs into duplicate groups."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Sequence

from .matcher import SimilarPair
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DuplicateGroup:
    """A connected set of similar images with a canonical representative."""
    group_id: str
    paths: List[str]
    canonical_path: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def group_similar(pairs: Sequence[SimilarPair]) -> List[DuplicateGroup]:
    """
    Merge pairs into groups using single-link clustering.

    Two images land in the same group when a chain of similar pairs connects
    them, even if their own distance exceeds the threshold.

    Args:
        pairs: Output of ``find_similar``

    Returns:
        DuplicateGroup list ordered by canonical path
    """
    if not pairs:
        return []

    parent: Dict[str, str] = {}

    def find(x: str) -> str:
        parent.setdefault(x, x)
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(x: str, y: str) -> None:
        px, py = find(x), find(y)
        if px != py:
            parent[px] = py

    for pair in pairs:
        union(pair.path_a, pair.path_b)

    clusters: Dict[str, List[str]] = {}
    for path in list(parent):
        clusters.setdefault(find(path), []).append(path)

    groups = []
    for counter, members in enumerate(sorted(clusters.values(), key=min), start=1):
        paths = sorted(members)
        group = DuplicateGroup(group_id=f"dup_{counter:03d}", paths=paths, canonical_path=paths[0])
        groups.append(group)
        logger.debug(f"Created group {group.group_id} with {len(paths)} images, canonical: {group.canonical_path}")

    return groups
