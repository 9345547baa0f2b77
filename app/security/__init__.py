"""Request token signing."""

from app.security.tokens import TokenSigner

__all__ = ["TokenSigner"]
