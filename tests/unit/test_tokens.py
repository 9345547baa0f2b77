"""Tests for request tokens."""

import pytest

from app.security import TokenSigner


class FakeClock:
    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestTokenSigner:
    def test_issued_token_verifies(self):
        signer = TokenSigner(secret="s", ttl=60)
        assert signer.verify(signer.issue("faq_get_faqs"), "faq_get_faqs")

    def test_missing_token(self):
        assert not TokenSigner(secret="s").verify(None, "faq_get_faqs")
        assert not TokenSigner(secret="s").verify("", "faq_get_faqs")

    def test_garbage_token(self):
        assert not TokenSigner(secret="s").verify("not-a-token", "faq_get_faqs")

    def test_bound_to_action(self):
        signer = TokenSigner(secret="s")
        assert not signer.verify(signer.issue("other_action"), "faq_get_faqs")

    def test_bound_to_secret(self):
        token = TokenSigner(secret="a").issue("faq_get_faqs")
        assert not TokenSigner(secret="b").verify(token, "faq_get_faqs")

    def test_tampered_expiry(self):
        signer = TokenSigner(secret="s")
        expires, _, signature = signer.issue("faq_get_faqs").partition(".")
        assert not signer.verify(f"{int(expires) + 1000}.{signature}", "faq_get_faqs")

    def test_expires(self):
        clock = FakeClock()
        signer = TokenSigner(secret="s", ttl=60, clock=clock)
        token = signer.issue("faq_get_faqs")
        clock.now += 61
        assert not signer.verify(token, "faq_get_faqs")

    def test_ttl_must_be_positive(self):
        with pytest.raises(ValueError):
            TokenSigner(ttl=0)

    def test_non_ascii_signature(self):
        signer = TokenSigner(secret="s")
        expires, _, _ = signer.issue("faq_get_faqs").partition(".")
        assert not signer.verify(f"{expires}.été", "faq_get_faqs")
