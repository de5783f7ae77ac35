"""
Scorecard data models — option scores, criterion options and criteria.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from ..config import FATAL_STR, POINTS_MAX, POINTS_MIN
from ..errors import InvalidSelectionError

logger = logging.getLogger("qams.scoring")

# Base-10 signed integer, ASCII digits only
_POINTS_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class OptionScore:
    """How selecting an option affects a review's total points."""

    is_fatal = False

    def __new__(cls, *args, **kwargs):
        if cls is OptionScore:
            raise TypeError("OptionScore can't be instantiated directly; use Points or Fatal")
        return super().__new__(cls)

    @staticmethod
    def parse(text: str) -> Optional["OptionScore"]:
        """
        Parse an option score from a CSV cell.

        "FATAL" (any case) yields Fatal, a signed integer yields Points.
        Returns None for anything else; an unparsable cell is not an error.
        """
        if text.upper() == FATAL_STR:
            return FATAL
        if not _POINTS_PATTERN.fullmatch(text):
            return None
        points = int(text)
        if points < POINTS_MIN or points > POINTS_MAX:
            return None
        return Points(points)


@dataclass(frozen=True)
class Points(OptionScore):
    """A point value added to the review total. May be negative."""
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Fatal(OptionScore):
    """Selecting a fatal option zeroes the whole review's total points."""

    is_fatal = True

    def __str__(self) -> str:
        return FATAL_STR


FATAL = Fatal()


@dataclass(frozen=True)
class CriterionOption:
    """A labeled answer to a criterion, e.g. "YES" worth 1 point."""
    label: str
    score: OptionScore

    def to_dict(self) -> dict:
        return {"label": self.label, "score": str(self.score)}


class Criterion:
    """
    A single scored question in a review.

    The option list is fixed at construction. The selection is either unset
    (unanswered) or a valid index into the options; the comment is free text
    that changes independently of the selection.
    """

    def __init__(self, label: str, options: Sequence[CriterionOption] = ()):
        self.label = label
        self._options: tuple[CriterionOption, ...] = tuple(options)
        self._selection_index: Optional[int] = None
        self._comment = ""

    def __repr__(self) -> str:
        return (
            f"Criterion(label={self.label!r}, options={len(self._options)}, "
            f"selection_index={self._selection_index!r})"
        )

    @property
    def options(self) -> tuple[CriterionOption, ...]:
        return self._options

    @property
    def selection_index(self) -> Optional[int]:
        return self._selection_index

    @property
    def is_answered(self) -> bool:
        return self._selection_index is not None

    # --- Scoring ---

    def max_points(self) -> int:
        """Highest point value among the options. Fatal options don't count."""
        max_points = 0
        for option in self._options:
            if isinstance(option.score, Points) and option.score.value > max_points:
                max_points = option.score.value
        return max_points

    # --- Selection ---

    def set_selection(self, index: int):
        """Select an option or change the option selected."""
        if isinstance(index, bool) or not 0 <= index < len(self._options):
            raise InvalidSelectionError(
                f"Tried to select option {index} of criterion '{self.label}', "
                f"which has {len(self._options)} options"
            )
        self._selection_index = index
        logger.debug(f"[{self.label}] Selected '{self._options[index].label}'")

    def clear_selection(self):
        """Return the criterion to the unanswered state."""
        self._selection_index = None

    def option_index(self, label: str) -> Optional[int]:
        """Index of the first option with the given label, or None."""
        for i, option in enumerate(self._options):
            if option.label == label:
                return i
        return None

    def select_label(self, label: str):
        """Select the option with the given label."""
        index = self.option_index(label)
        if index is None:
            available = ", ".join(o.label for o in self._options) or "none"
            raise InvalidSelectionError(
                f"Criterion '{self.label}' has no option '{label}' "
                f"(available: {available})"
            )
        self.set_selection(index)

    def selection(self) -> Optional[CriterionOption]:
        """The currently selected option, or None if unanswered."""
        if self._selection_index is None:
            return None
        return self._options[self._selection_index]

    def selection_score(self) -> Optional[OptionScore]:
        option = self.selection()
        return option.score if option is not None else None

    # --- Comment ---

    @property
    def comment(self) -> str:
        return self._comment

    def set_comment(self, text: str):
        self._comment = text

    def to_dict(self) -> dict:
        selection = self.selection()
        return {
            "label": self.label,
            "options": [o.to_dict() for o in self._options],
            "selection": selection.label if selection else None,
            "comment": self._comment,
            "max_points": self.max_points(),
        }
