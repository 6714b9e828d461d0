"""
JSON reports of similar pairs.

A report lists every pair found together with the duplicate groups they form,
so it can be handed to a relocator or reviewed by hand.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .dedup.cluster import group_similar
from .dedup.matcher import SimilarPair
from .logging import get_logger

logger = get_logger(__name__)


def build_report(pairs: Sequence[SimilarPair], threshold: int) -> Dict[str, Any]:
    """Build the serializable report structure for ``pairs``."""
    return {
        "threshold": threshold,
        "total_pairs": len(pairs),
        "pairs": [pair.to_dict() for pair in pairs],
        "groups": [group.to_dict() for group in group_similar(pairs)],
    }


def write_report_json(pairs: Sequence[SimilarPair], report_path: Path, threshold: int) -> Path:
    """
    Write a JSON report of ``pairs`` to ``report_path``.

    Args:
        pairs: Similar pairs to record
        report_path: Destination file; parent directories are created
        threshold: Threshold the pairs were found with

    Returns:
        Path to the written report
    """
    report_path = Path(report_path)
    report_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(report_path, 'w', encoding='utf-8') as f:
            json.dump(build_report(pairs, threshold), f, indent=2, ensure_ascii=False)
    except Exception as exc:
        logger.error(f"Failed to write report to {report_path}: {exc}")
        raise

    logger.info(f"Wrote report to {report_path}")
    return report_path


def load_report_json(report_path: Path) -> List[SimilarPair]:
    """Read the pairs back from a report written by ``write_report_json``."""
    with open(report_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    return [
        SimilarPair(path_a=item["path_a"], path_b=item["path_b"], distance=int(item["distance"]))
        for item in data.get("pairs", [])
    ]
