"""FAQ content tables."""

FAQ_DDL = """
CREATE TABLE IF NOT EXISTS faq (
    id INTEGER PRIMARY KEY,
    question VARCHAR NOT NULL,
    answer_html VARCHAR NOT NULL,
    menu_order INTEGER NOT NULL DEFAULT 0,
    status VARCHAR NOT NULL DEFAULT 'publish'
)
"""

FAQ_CATEGORY_DDL = """
CREATE TABLE IF NOT EXISTS faq_category (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL
)
"""

FAQ_CATEGORY_LINK_DDL = """
CREATE TABLE IF NOT EXISTS faq_category_link (
    faq_id INTEGER NOT NULL,
    category_id INTEGER NOT NULL,
    PRIMARY KEY (faq_id, category_id)
)
"""

FAQ_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_faq_link_category ON faq_category_link(category_id)",
]
