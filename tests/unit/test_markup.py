"""Tests for accordion markup."""

from bs4 import BeautifulSoup

from app.models.faq import FaqEntry, Selection
from app.repositories import FaqRepository
from app.services.faq import EMPTY_MESSAGE, INSTANCE_PLACEHOLDER, MarkupBuilder, bind_instance


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


class StaticRepo:
    def __init__(self, entries):
        self.entries = entries

    def get_entries(self, selection, limit=None):
        return list(self.entries)


class TestMarkupBuilder:
    def test_order_field_wins_over_insertion(self):
        entries = [
            FaqEntry(1, "Third", "<p>c</p>", 3),
            FaqEntry(2, "First", "<p>a</p>", 1),
            FaqEntry(3, "Second", "<p>b</p>", 2),
        ]
        soup = _soup(MarkupBuilder(StaticRepo(entries)).build(Selection.all(), "w1"))
        questions = [s.get_text() for s in soup.select(".faq-accordion__qtext")]
        assert questions == ["First", "Second", "Third"]

    def test_ids_and_cross_references(self):
        entries = [FaqEntry(42, "Q", "<p>A</p>", 0)]
        soup = _soup(MarkupBuilder(StaticRepo(entries)).build(Selection.all(), "w1"))
        btn = soup.find("button")
        panel = soup.find(id=btn["aria-controls"])
        assert btn["id"] == "w1-faq-btn-42-1"
        assert panel["id"] == "w1-faq-panel-42-1"
        assert panel["aria-labelledby"] == btn["id"]
        assert panel["role"] == "region"

    def test_items_start_collapsed(self):
        entries = [FaqEntry(1, "Q1", "<p>A</p>", 0), FaqEntry(2, "Q2", "<p>B</p>", 1)]
        soup = _soup(MarkupBuilder(StaticRepo(entries)).build(Selection.all(), "w1"))
        assert all(b["aria-expanded"] == "false" for b in soup.find_all("button"))
        assert all(p.has_attr("hidden") for p in soup.select(".faq-accordion__panel"))

    def test_empty_selection_renders_single_placeholder(self):
        soup = _soup(MarkupBuilder(StaticRepo([])).build(Selection.all()))
        assert len(soup.find_all(True)) == 1
        assert soup.find("p").get_text() == EMPTY_MESSAGE
        assert soup.find("button") is None

    def test_question_escaped_answer_kept(self):
        entries = [FaqEntry(1, "Is <b> allowed?", "<p><em>Yes</em></p>", 0)]
        html = MarkupBuilder(StaticRepo(entries)).build(Selection.all(), "w1")
        assert "Is &lt;b&gt; allowed?" in html
        assert "<p><em>Yes</em></p>" in html

    def test_default_build_is_instance_neutral(self):
        entries = [FaqEntry(1, "Q", "<p>A</p>", 0)]
        html = MarkupBuilder(StaticRepo(entries)).build(Selection.all())
        assert f"{INSTANCE_PLACEHOLDER}-faq-btn-1-1" in html

    def test_two_instances_never_share_ids(self):
        entries = [FaqEntry(i, f"Q{i}", "<p>A</p>", i) for i in range(1, 4)]
        neutral = MarkupBuilder(StaticRepo(entries)).build(Selection.all())
        ids_a = {t["id"] for t in _soup(bind_instance(neutral, "faq-a")).find_all(id=True)}
        ids_b = {t["id"] for t in _soup(bind_instance(neutral, "faq-b")).find_all(id=True)}
        assert len(ids_a) == 6
        assert ids_a.isdisjoint(ids_b)

    def test_reads_from_repository(self, seeded):
        soup = _soup(MarkupBuilder(FaqRepository()).build(Selection.category(2), "w1"))
        assert [b["id"] for b in soup.find_all("button")] == ["w1-faq-btn-11-1", "w1-faq-btn-12-2"]

    def test_category_without_entries(self, seeded):
        html = MarkupBuilder(FaqRepository()).build(Selection.category(3))
        assert EMPTY_MESSAGE in html
