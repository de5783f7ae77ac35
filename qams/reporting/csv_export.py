"""
CSV exporter and loader — Reads scorecard templates and writes completed reviews.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import CSV_ENCODING
from ..scoring import Review

logger = logging.getLogger("qams.reporting")


def load_review(path: Path) -> Review:
    """
    Read a scorecard template and return an unanswered review.

    Raises:
        OSError: the file cannot be read.
        CsvFormatError: the file is not a valid scorecard grid.
    """
    # Text mode folds CRLF line endings into the "\n" row delimiter
    with open(path, "r", encoding=CSV_ENCODING) as fh:
        text = fh.read()
    review = Review.from_csv(text)
    logger.info(f"Loaded {len(review)} criteria from {path}")
    return review


def export_csv(
    review: Review,
    output_dir: Path,
    review_id: str,
) -> Path:
    """
    Write the review's selections and comments to a CSV file.

    Returns:
        Path to the created CSV file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    filepath = output_dir / f"review_{review_id}.csv"

    with open(filepath, "w", newline="", encoding=CSV_ENCODING) as fh:
        fh.write(review.to_csv())

    logger.info(f"Wrote CSV review to {filepath}")
    return filepath
