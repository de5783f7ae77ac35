"""Tests for qams.scoring.models — option scores, options and criteria."""

import pytest

from qams.errors import InvalidSelectionError
from qams.scoring import FATAL, Criterion, CriterionOption, Fatal, OptionScore, Points


def _criterion(*scores, label="Criterion"):
    return Criterion(label, [CriterionOption(f"OPT{i}", s) for i, s in enumerate(scores)])


# ===========================================================================
# OptionScore.parse
# ===========================================================================

class TestOptionScoreParse:
    @pytest.mark.parametrize("text", ["fatal", "FATAL", "Fatal", "fAtAl"])
    def test_fatal_any_case(self, text):
        assert OptionScore.parse(text) == FATAL

    def test_positive_integer(self):
        assert OptionScore.parse("3") == Points(3)

    def test_negative_integer(self):
        assert OptionScore.parse("-2") == Points(-2)

    def test_explicit_plus_sign(self):
        assert OptionScore.parse("+4") == Points(4)

    def test_zero(self):
        assert OptionScore.parse("0") == Points(0)

    @pytest.mark.parametrize("text", ["3.5", "abc", "", " ", " 3", "3 ", "1_000", "-", "FATAL!", "N/A"])
    def test_unparsable_yields_none(self, text):
        assert OptionScore.parse(text) is None

    def test_out_of_32_bit_range_yields_none(self):
        assert OptionScore.parse("2147483647") == Points(2147483647)
        assert OptionScore.parse("-2147483648") == Points(-2147483648)
        assert OptionScore.parse("2147483648") is None
        assert OptionScore.parse("-2147483649") is None

    def test_str_round_trips(self):
        for score in (Points(7), Points(-1), FATAL):
            assert OptionScore.parse(str(score)) == score

    def test_is_fatal_flag(self):
        assert FATAL.is_fatal is True
        assert Points(1).is_fatal is False

    def test_base_class_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            OptionScore()

    def test_fatal_instances_are_equal(self):
        assert Fatal() == FATAL
        assert Fatal() != Points(0)


# ===========================================================================
# CriterionOption
# ===========================================================================

class TestCriterionOption:
    def test_accessors(self):
        option = CriterionOption("YES", Points(1))
        assert option.label == "YES"
        assert option.score == Points(1)

    def test_immutable(self):
        option = CriterionOption("YES", Points(1))
        with pytest.raises(AttributeError):
            option.label = "NO"

    def test_to_dict(self):
        assert CriterionOption("NO", FATAL).to_dict() == {"label": "NO", "score": "FATAL"}


# ===========================================================================
# Criterion.max_points
# ===========================================================================

class TestCriterionMaxPoints:
    def test_ignores_fatal_option(self):
        criterion = Criterion("Test criterion", [
            CriterionOption("YES", Points(1)),
            CriterionOption("PARTIALLY", Points(0)),
            CriterionOption("NO", FATAL),
        ])
        assert criterion.max_points() == 1

    def test_highest_points_option(self):
        assert _criterion(Points(3), Points(2), Points(1), Points(0)).max_points() == 3

    def test_empty_options(self):
        assert Criterion("Empty", []).max_points() == 0

    def test_all_fatal(self):
        assert _criterion(FATAL, FATAL).max_points() == 0

    def test_all_negative_floors_at_zero(self):
        assert _criterion(Points(-1), Points(-5)).max_points() == 0

    def test_independent_of_selection(self):
        criterion = _criterion(Points(3), Points(1))
        criterion.set_selection(1)
        assert criterion.max_points() == 3


# ===========================================================================
# Criterion selection
# ===========================================================================

class TestCriterionSelection:
    def test_starts_unanswered(self):
        criterion = _criterion(Points(1), Points(0))
        assert criterion.selection() is None
        assert criterion.selection_score() is None
        assert criterion.selection_index is None
        assert criterion.is_answered is False

    def test_set_selection(self):
        criterion = Criterion("Criterion", [
            CriterionOption("EXCEEDS", Points(3)),
            CriterionOption("MEETS", Points(2)),
            CriterionOption("BELOW", Points(0)),
        ])
        criterion.set_selection(0)
        assert criterion.selection().label == "EXCEEDS"
        assert criterion.selection_score() == Points(3)
        assert criterion.is_answered is True

    def test_reselect_changes_answer(self):
        criterion = _criterion(Points(3), Points(2))
        criterion.set_selection(0)
        criterion.set_selection(1)
        assert criterion.selection_index == 1

    def test_fatal_selection_score(self):
        criterion = _criterion(Points(1), FATAL)
        criterion.set_selection(1)
        assert criterion.selection_score() == FATAL

    @pytest.mark.parametrize("index", [2, 3, -1])
    def test_out_of_range_raises(self, index):
        criterion = _criterion(Points(1), Points(0))
        with pytest.raises(InvalidSelectionError):
            criterion.set_selection(index)

    @pytest.mark.parametrize("index", [True, False])
    def test_bool_index_rejected(self, index):
        criterion = _criterion(Points(1), Points(0))
        with pytest.raises(InvalidSelectionError):
            criterion.set_selection(index)
        assert criterion.selection() is None

    def test_out_of_range_keeps_previous_selection(self):
        criterion = _criterion(Points(1), Points(0))
        criterion.set_selection(1)
        with pytest.raises(IndexError):
            criterion.set_selection(5)
        assert criterion.selection_index == 1

    def test_empty_criterion_cannot_be_answered(self):
        with pytest.raises(InvalidSelectionError):
            Criterion("Empty", []).set_selection(0)

    def test_clear_selection(self):
        criterion = _criterion(Points(1), Points(0))
        criterion.set_selection(0)
        criterion.clear_selection()
        assert criterion.selection() is None
        assert criterion.is_answered is False

    def test_select_label(self):
        criterion = _criterion(Points(1), Points(0))
        criterion.select_label("OPT1")
        assert criterion.selection_index == 1

    def test_select_unknown_label_raises(self):
        criterion = _criterion(Points(1))
        with pytest.raises(InvalidSelectionError, match="no option 'MAYBE'"):
            criterion.select_label("MAYBE")

    def test_option_index_first_match(self):
        criterion = Criterion("Dupes", [
            CriterionOption("YES", Points(1)),
            CriterionOption("YES", Points(2)),
        ])
        assert criterion.option_index("YES") == 0
        assert criterion.option_index("NO") is None


# ===========================================================================
# Criterion comment
# ===========================================================================

class TestCriterionComment:
    def test_default_empty(self):
        assert _criterion(Points(1)).comment == ""

    def test_set_comment_independent_of_selection(self):
        criterion = _criterion(Points(1), Points(0))
        criterion.set_comment("Needs coaching")
        assert criterion.comment == "Needs coaching"
        assert criterion.selection() is None
        criterion.set_selection(0)
        assert criterion.comment == "Needs coaching"

    def test_to_dict(self):
        criterion = _criterion(Points(2), FATAL, label="Greeting")
        criterion.set_selection(0)
        criterion.set_comment("ok")
        assert criterion.to_dict() == {
            "label": "Greeting",
            "options": [
                {"label": "OPT0", "score": "2"},
                {"label": "OPT1", "score": "FATAL"},
            ],
            "selection": "OPT0",
            "comment": "ok",
            "max_points": 2,
        }
