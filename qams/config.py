"""
Configuration module for QAMS.
Defines the scorecard CSV format tokens and the run-time settings of the CLI.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from .errors import ConfigError


# ─── Option Scores ──────────────────────────────────────────────────────────

FATAL_STR = "FATAL"               # Case-insensitive marker for fatal options

# Point values are signed 32-bit integers
POINTS_MIN = -(2 ** 31)
POINTS_MAX = 2 ** 31 - 1


# ─── CSV Format ─────────────────────────────────────────────────────────────

ROW_DELIMITER = "\n"
COLUMN_DELIMITER = ","

# Header of an exported review
EXPORT_HEADER = ("Criterion", "Selection", "Comments")

# Label of the row carrying the percent score in an exported review
PERCENT_SCORE_LABEL = "Percent Score"

PERCENT_DECIMALS = 2
UNDEFINED_PERCENT_STR = "N/A"     # Shown when a review has no points available

# BOM-prefixed UTF-8 so spreadsheet apps pick up the encoding
CSV_ENCODING = "utf-8-sig"


# ─── Output Configuration ───────────────────────────────────────────────────

@dataclass
class OutputConfig:
    """Output directory and format settings."""
    base_dir: str = ""
    timestamp: str = ""           # Prefix of the review ID in report file names
    formats: list[str] = field(default_factory=lambda: ["csv", "json"])

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        if not self.base_dir:
            self.base_dir = os.path.join(os.getcwd(), "qams_reviews")

    @property
    def review_dir(self) -> Path:
        return Path(self.base_dir)


# ─── Master Configuration ───────────────────────────────────────────────────

@dataclass
class QamsConfig:
    """Top-level configuration for a CLI run."""
    output: OutputConfig = field(default_factory=OutputConfig)
    reviewer: str = ""            # Name recorded in the JSON report
    verbose: bool = False

    @classmethod
    def from_file(cls, path: str | Path) -> "QamsConfig":
        """Load configuration from a JSON file. Unknown keys are ignored."""
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        config = cls()
        if "output" in data:
            for k, v in data["output"].items():
                if hasattr(config.output, k):
                    setattr(config.output, k, v)
        config.reviewer = data.get("reviewer", "")
        config.verbose = data.get("verbose", False)
        return config
