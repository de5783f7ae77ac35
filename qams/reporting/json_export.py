"""
JSON exporter — Produces the full scoring breakdown of a review.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from .. import __version__
from ..scoring import Review

logger = logging.getLogger("qams.reporting")


def export_json(
    review: Review,
    output_dir: Path,
    review_id: str,
    reviewer: str = "",
) -> Path:
    """
    Write the review's scores, selections and comments to a JSON file.

    Returns:
        Path to the created JSON file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    payload = {
        "metadata": {
            "engine": "QAMS",
            "version": __version__,
            "review_id": review_id,
            "reviewer": reviewer,
            "generated_utc": datetime.now(timezone.utc).isoformat(),
        },
        "scoring": review.to_dict(),
    }

    filepath = output_dir / f"review_{review_id}.json"
    with open(filepath, "w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, ensure_ascii=False)

    logger.info(f"Wrote JSON review to {filepath}")
    return filepath
