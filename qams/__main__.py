"""
QAMS — Command-line front end

Usage:
    python -m qams summary scorecard.csv
    python -m qams review scorecard.csv --answer 1=YES --answer 2=NO --comment 2="Missed greeting"
    python -m qams review scorecard.csv --interactive --reviewer "J. Smith"
    python -m qams review scorecard.csv --config qams.json --formats csv json

Criteria are addressed by their 1-based position in the scorecard and
options by their label as it appears in the scorecard header.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
import uuid
from pathlib import Path
from typing import Callable, Optional

from . import __version__
from .config import QamsConfig
from .errors import QamsError
from .reporting import export_csv, export_json, load_review
from .scoring import Review

logger = logging.getLogger("qams.cli")

# Criterion and option numbers, ASCII digits only
_NUMBER_PATTERN = re.compile(r"[0-9]+")


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="qams",
        description="QAMS — Quality Assurance Management System",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # summary
    sum_p = subparsers.add_parser("summary", help="Show a scorecard's criteria and options")
    sum_p.add_argument("scorecard", type=Path, help="Path to the scorecard CSV")

    # review
    rev_p = subparsers.add_parser("review", help="Complete a review against a scorecard")
    rev_p.add_argument("scorecard", type=Path, help="Path to the scorecard CSV")
    rev_p.add_argument(
        "--answer", "-a",
        action="append",
        default=[],
        metavar="N=OPTION",
        help="Select OPTION for criterion N (1-based). Repeatable.",
    )
    rev_p.add_argument(
        "--comment", "-m",
        action="append",
        default=[],
        metavar="N=TEXT",
        help="Attach a comment to criterion N (1-based). Repeatable.",
    )
    rev_p.add_argument(
        "--interactive", "-i",
        action="store_true",
        help="Prompt for a selection and comment on every criterion",
    )
    rev_p.add_argument(
        "--config", "-c",
        type=Path,
        help="Path to JSON configuration file",
    )
    rev_p.add_argument(
        "--reviewer",
        type=str,
        default=None,
        help="Reviewer name recorded in the JSON report (overrides config)",
    )
    rev_p.add_argument(
        "--output-dir", "-o",
        type=Path,
        default=None,
        help="Output directory for reports (overrides config)",
    )
    rev_p.add_argument(
        "--formats",
        nargs="+",
        choices=["csv", "json"],
        default=None,
        help="Report formats to generate (default: csv json)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> QamsConfig:
    """Build run configuration from an optional config file plus CLI overrides."""
    config_path = getattr(args, "config", None)
    if config_path and config_path.exists():
        config = QamsConfig.from_file(config_path)
    else:
        config = QamsConfig()

    if args.verbose:
        config.verbose = True
    if getattr(args, "reviewer", None):
        config.reviewer = args.reviewer
    if getattr(args, "output_dir", None):
        config.output.base_dir = str(args.output_dir)
    if getattr(args, "formats", None):
        config.output.formats = args.formats
    return config


# ---------------------------------------------------------------------------
# Review completion
# ---------------------------------------------------------------------------

def _split_assignment(review: Review, assignment: str) -> tuple[int, str]:
    """Split "N=VALUE" into a 0-based criterion index and the value."""
    number, sep, value = assignment.partition("=")
    if not sep or not _NUMBER_PATTERN.fullmatch(number.strip()):
        raise QamsError(f"Expected N=VALUE with N a criterion number, got '{assignment}'")
    index = int(number) - 1
    if not 0 <= index < len(review):
        raise QamsError(
            f"Criterion {number.strip()} doesn't exist; the scorecard has {len(review)} criteria"
        )
    return index, value


def apply_answers(review: Review, answers: list[str]):
    for assignment in answers:
        index, label = _split_assignment(review, assignment)
        review[index].select_label(label)


def apply_comments(review: Review, comments: list[str]):
    for assignment in comments:
        index, text = _split_assignment(review, assignment)
        review[index].set_comment(text)


def prompt_review(review: Review, input_fn: Callable[[str], str] = input):
    """Walk through every criterion asking for a selection and a comment."""
    total = len(review)
    for n, criterion in enumerate(review, start=1):
        print(f"\n  [{n}/{total}] {criterion.label}")
        for i, option in enumerate(criterion.options, start=1):
            print(f"      {i}) {option.label} ({option.score})")

        if criterion.options:
            while True:
                choice = input_fn(f"  Selection (1-{len(criterion.options)}, blank to skip): ").strip()
                if not choice:
                    break
                if _NUMBER_PATTERN.fullmatch(choice) and 1 <= int(choice) <= len(criterion.options):
                    criterion.set_selection(int(choice) - 1)
                    break
                print(f"  ⚠  '{choice}' is not a valid option number.")
        else:
            print("      (no options, cannot be answered)")

        comment = input_fn("  Comment (optional): ").strip()
        if comment:
            criterion.set_comment(comment)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def print_summary(review: Review):
    print(f"\n  {'#':>3s}  {'Criterion':<50s} {'Max':>5s}  Options")
    print(f"  {'─'*3}  {'─'*50} {'─'*5}  {'─'*30}")
    for n, criterion in enumerate(review, start=1):
        options = ", ".join(f"{o.label}={o.score}" for o in criterion.options)
        print(f"  {n:>3d}  {criterion.label:<50s} {criterion.max_points():>5d}  {options}")
    print(f"\n  Criteria:    {len(review)}")
    print(f"  Max Points:  {review.max_points()}")
    print()


def print_score(review: Review):
    print(f"  Answered:       {review.answered_count()}/{len(review)}")
    print(f"  Total Points:   {review.total_points()}/{review.max_points()}")
    print(f"  Percent Score:  {review.percent_score_string()}")
    if review.has_fatal():
        print("  ⚠  A fatal option was selected; the review scores 0 points.")


def generate_reports(
    review: Review,
    output_dir: Path,
    review_id: str,
    reviewer: str,
    formats: list[str],
) -> list[Path]:
    """Generate all requested report formats."""
    created = []

    if "csv" in formats:
        path = export_csv(review, output_dir, review_id)
        created.append(path)
        print(f"  📊 CSV:   {path}")

    if "json" in formats:
        path = export_json(review, output_dir, review_id, reviewer)
        created.append(path)
        print(f"  📄 JSON:  {path}")

    return created


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _cmd_summary(args: argparse.Namespace) -> int:
    review = load_review(args.scorecard)
    print_summary(review)
    return 0


def _cmd_review(args: argparse.Namespace) -> int:
    config = build_config(args)
    if config.verbose:
        logging.getLogger("qams").setLevel(logging.DEBUG)
    review = load_review(args.scorecard)

    apply_answers(review, args.answer)
    apply_comments(review, args.comment)
    if args.interactive:
        prompt_review(review)

    print("\n" + "=" * 70)
    print(" REVIEW SCORE")
    print("=" * 70 + "\n")
    print_score(review)

    review_id = f"{config.output.timestamp}_{uuid.uuid4().hex[:8]}"
    print()
    created = generate_reports(
        review=review,
        output_dir=config.output.review_dir,
        review_id=review_id,
        reviewer=config.reviewer,
        formats=config.output.formats,
    )
    print(f"\n  Files: {len(created)} reports generated\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        print("Usage: qams {summary|review} SCORECARD [options]")
        return 0

    try:
        if args.command == "summary":
            return _cmd_summary(args)
        return _cmd_review(args)
    except (QamsError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"\n❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
