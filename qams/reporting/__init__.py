"""Reporting package — loading scorecard templates and writing completed reviews."""

from .json_export import export_json
from .csv_export import export_csv, load_review

__all__ = [
    "export_json",
    "export_csv",
    "load_review",
]
