"""
Review — an ordered collection of criteria scored together.

Scoring model:
  - Max points is the sum of each criterion's best non-fatal option.
  - Total points is the sum of the selected options' points; unanswered
    criteria contribute nothing.
  - A single fatal selection anywhere zeroes the total.
  - Percent score is total / max, undefined when max is 0.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Iterator

from ..config import PERCENT_DECIMALS, UNDEFINED_PERCENT_STR
from .csv_format import format_review, parse_criteria
from .models import Criterion, Points

logger = logging.getLogger("qams.scoring")


class Review:
    """A QA review: criteria plus the scores derived from their selections."""

    def __init__(self, criteria: Iterable[Criterion] = ()):
        self._criteria: list[Criterion] = list(criteria)

    def __repr__(self) -> str:
        return f"Review(criteria={len(self._criteria)})"

    # --- Criteria access ---

    @property
    def criteria(self) -> tuple[Criterion, ...]:
        return tuple(self._criteria)

    def __len__(self) -> int:
        return len(self._criteria)

    def __iter__(self) -> Iterator[Criterion]:
        return iter(self._criteria)

    def __getitem__(self, index: int) -> Criterion:
        return self._criteria[index]

    def add_criterion(self, criterion: Criterion):
        """Append a criterion. Existing criterion indices are unchanged."""
        self._criteria.append(criterion)

    # --- Scoring ---

    def max_points(self) -> int:
        """Best achievable total, independent of the current selections."""
        return sum(c.max_points() for c in self._criteria)

    def total_points(self) -> int:
        """Points earned by the current selections; 0 if any selection is fatal."""
        total = 0
        for criterion in self._criteria:
            score = criterion.selection_score()
            if score is None:
                continue
            if score.is_fatal:
                logger.debug(f"Fatal selection on '{criterion.label}', total is 0")
                return 0
            if isinstance(score, Points):
                total += score.value
        return total

    def percent_score(self) -> float:
        """Total as a percentage of max. NaN when the review has no points available."""
        max_points = self.max_points()
        if max_points == 0:
            return math.nan
        return 100 * self.total_points() / max_points

    def percent_score_string(self) -> str:
        percent = self.percent_score()
        if math.isnan(percent):
            return UNDEFINED_PERCENT_STR
        return f"{percent:.{PERCENT_DECIMALS}f}%"

    def answered_count(self) -> int:
        return sum(1 for c in self._criteria if c.is_answered)

    def has_fatal(self) -> bool:
        for criterion in self._criteria:
            score = criterion.selection_score()
            if score is not None and score.is_fatal:
                return True
        return False

    # --- Serialization ---

    @classmethod
    def from_csv(cls, text: str) -> "Review":
        """
        Build an unanswered review from scorecard template text.

        Raises:
            CsvFormatError: the text is empty or the grid is ragged.
        """
        return cls(parse_criteria(text))

    def to_csv(self) -> str:
        return format_review(self)

    def to_dict(self) -> dict:
        percent = self.percent_score()
        return {
            "total_points": self.total_points(),
            "max_points": self.max_points(),
            "percent_score": None if math.isnan(percent) else round(percent, PERCENT_DECIMALS),
            "percent_score_display": self.percent_score_string(),
            "fatal": self.has_fatal(),
            "answered": self.answered_count(),
            "criteria_count": len(self._criteria),
            "criteria": [c.to_dict() for c in self._criteria],
        }
