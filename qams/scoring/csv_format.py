"""
Scorecard CSV codec.

Import grammar (a scorecard template):

    Criterion,YES,PARTLY,NO
    Greeted the customer,2,1,0
    Verified identity,1,,FATAL

The header names the options; each data row is one criterion whose cells
hold the option scores. Cells that are neither a number nor FATAL are left
out, so each criterion only uses the columns it needs.

Export grammar (a completed review):

    Criterion,Selection,Comments
    Percent Score,66.67%,
    Greeted the customer,PARTLY,Friendly but rushed

Neither direction supports quoting. Commas or newlines inside labels and
comments are not representable.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..config import COLUMN_DELIMITER, EXPORT_HEADER, PERCENT_SCORE_LABEL, ROW_DELIMITER
from ..errors import CsvFormatError
from .models import Criterion, CriterionOption, OptionScore

if TYPE_CHECKING:
    from .review import Review

logger = logging.getLogger("qams.csv")


def parse_criteria(text: str) -> list[Criterion]:
    """
    Parse scorecard template text into unanswered criteria.

    Raises:
        CsvFormatError: the text is empty or a row's column count differs
            from the header's.
    """
    text = text.strip()
    if not text:
        raise CsvFormatError("Scorecard CSV is empty; expected a header row")

    rows = [row.split(COLUMN_DELIMITER) for row in text.split(ROW_DELIMITER)]
    header = rows[0]
    option_labels = header[1:]

    criteria = []
    for line_no, cells in enumerate(rows[1:], start=2):
        if len(cells) != len(header):
            raise CsvFormatError(
                f"Line {line_no} has {len(cells)} columns but the header has {len(header)}"
            )

        options = []
        for option_label, cell in zip(option_labels, cells[1:]):
            score = OptionScore.parse(cell)
            if score is None:
                if cell.strip():
                    logger.warning(
                        f"Line {line_no}: ignoring unrecognized score '{cell}' "
                        f"for option '{option_label}'"
                    )
                continue
            options.append(CriterionOption(option_label, score))

        criteria.append(Criterion(cells[0], options))
        logger.debug(f"Line {line_no}: '{cells[0]}' with {len(options)} options")

    logger.info(f"Parsed {len(criteria)} criteria with {len(option_labels)} option columns")
    return criteria


def format_review(review: "Review") -> str:
    """Render a review's selections, comments and percent score as CSV text."""
    rows = [
        list(EXPORT_HEADER),
        [PERCENT_SCORE_LABEL, review.percent_score_string(), ""],
    ]
    for criterion in review:
        selection = criterion.selection()
        rows.append([
            criterion.label,
            selection.label if selection else "",
            criterion.comment,
        ])
    return ROW_DELIMITER.join(COLUMN_DELIMITER.join(row) for row in rows)
