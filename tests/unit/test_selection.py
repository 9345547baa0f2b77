"""Tests for category selection parsing and resolution."""

from app.models.faq import INT_MAX, Category, Selection, absint, intval
from app.models.faq.selection import INT_MIN


class TestAbsint:
    def test_plain_number(self):
        assert absint("12") == 12

    def test_leading_digits(self):
        assert absint("12abc") == 12

    def test_negative_is_made_positive(self):
        assert absint("-5") == 5

    def test_garbage_is_zero(self):
        assert absint("abc") == 0
        assert absint("") == 0
        assert absint(None) == 0


class TestSelectionParse:
    def test_all(self):
        assert Selection.parse("all").is_all
        assert Selection.parse(None).is_all

    def test_category(self):
        selection = Selection.parse("7")
        assert not selection.is_all
        assert selection.category_id == 7
        assert selection.key == "7"

    def test_unparseable_is_not_corrected_to_all(self):
        selection = Selection.parse("bogus")
        assert not selection.is_all
        assert selection.category_id == 0
        assert not selection.is_queryable

    def test_equal_inputs_give_equal_selections(self):
        assert Selection.parse("3") == Selection.category(3)
        assert Selection.parse("all") == Selection.all()


class TestSelectionResolve:
    categories = [Category(1, "Billing"), Category(2, "Accounts")]

    def test_known_category_kept(self):
        assert Selection.category(2).resolve(self.categories) == Selection.category(2)

    def test_unknown_category_collapses_to_all(self):
        assert Selection.category(9).resolve(self.categories).is_all

    def test_all_stays_all(self):
        assert Selection.all().resolve([]).is_all


class TestSaturation:
    def test_absint_saturates(self):
        assert absint("9" * 5000) == INT_MAX
        assert absint("-" + "9" * 30) == INT_MAX
        assert absint(2**70) == INT_MAX

    def test_leading_zeros_do_not_saturate(self):
        assert absint("0" * 40 + "7") == 7

    def test_intval_keeps_sign(self):
        assert intval("-5") == -5
        assert intval("12abc") == 12
        assert intval("-" + "9" * 30) == INT_MIN

    def test_parse_huge_term_is_unknown_category(self):
        selection = Selection.parse("9" * 5000)
        assert selection.category_id == INT_MAX
        assert selection.resolve([Category(1, "Billing")]).is_all
