"""Scoring package — scorecard data model, score aggregation and CSV codec."""

from .models import FATAL, Criterion, CriterionOption, Fatal, OptionScore, Points
from .review import Review

__all__ = [
    "FATAL",
    "Criterion",
    "CriterionOption",
    "Fatal",
    "OptionScore",
    "Points",
    "Review",
]
