"""Shared fixtures: in-memory DuckDB with a small FAQ set."""

import pytest

from app.container import container
from app.models.faq import Category, FaqEntry
from app.repositories import FaqRepository, close_db, configure_db

CATEGORIES = [
    Category(id=1, name="Billing"),
    Category(id=2, name="Accounts"),
    Category(id=3, name="Shipping"),
    Category(id=4, name="Drafts"),
]

ENTRIES = [
    (FaqEntry(10, "How do I pay?", "<p>Use a <strong>card</strong>.</p>", 3, frozenset({1})), "publish"),
    (FaqEntry(11, "Can I get a refund?", "<p>Yes,   within\n 30 days.</p>", 1, frozenset({1, 2})), "publish"),
    (FaqEntry(12, "How do I reset my password?", '<p>Click <a href="/reset">reset</a>.</p>', 2, frozenset({2})), "publish"),
    (FaqEntry(13, "Unreleased question", "<p>Not yet.</p>", 0, frozenset({4})), "draft"),
    (FaqEntry(14, "Blank answer", "<p>   </p>", 4, frozenset()), "publish"),
]


@pytest.fixture
def db():
    configure_db(":memory:")
    yield
    close_db()


@pytest.fixture
def writer(db) -> FaqRepository:
    return FaqRepository(read_only=False)


@pytest.fixture
def seeded(writer) -> FaqRepository:
    for category in CATEGORIES:
        writer.save_category(category)
    for entry, status in ENTRIES:
        writer.save_entry(entry, status=status)
    return writer


@pytest.fixture
def app_container(seeded):
    container.reset()
    container.init()
    yield container
    container.reset()


@pytest.fixture
def empty_container(db):
    container.reset()
    container.init()
    yield container
    container.reset()
