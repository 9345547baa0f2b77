"""FAQ repositories."""

from app.repositories.faq.content import FaqRepository

__all__ = ["FaqRepository"]
