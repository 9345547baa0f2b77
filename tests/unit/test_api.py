"""Tests for the filter endpoint views and HTTP app."""

import pytest
from fastapi.testclient import TestClient

from settings import AJAX_ACTION, DEFAULT_LOCALE
from web.api import faq
from web.api.errors import AuthorizationError, ValidationError
from web.api.faq.schemas import DEFAULT_INSTANCE_ID, FilterRequest
from web.http import create_app


def _request(container, **fields) -> FilterRequest:
    fields.setdefault("nonce", container.tokens.issue(AJAX_ACTION))
    return FilterRequest(**fields)


class TestFilterRequest:
    def test_alias_and_defaults(self):
        request = FilterRequest(instanceId="faq-1")
        assert request.instance_id == "faq-1"
        assert request.term == "all"
        assert request.action == AJAX_ACTION

    def test_instance_id_sanitized(self):
        assert FilterRequest(instanceId='faq-1"><script>').instance_id == "faq-1script"

    def test_empty_instance_id_defaults(self):
        assert FilterRequest(instanceId="<>").instance_id == DEFAULT_INSTANCE_ID


class TestResolveLocale:
    def test_missing_header(self):
        assert faq.resolve_locale(None) == DEFAULT_LOCALE

    def test_exact_match(self):
        assert faq.resolve_locale("fr-CA,fr;q=0.9") == "fr_CA"

    def test_language_match(self):
        assert faq.resolve_locale("fr;q=0.9") == "fr_CA"

    def test_unsupported_falls_back(self):
        assert faq.resolve_locale("de-DE") == DEFAULT_LOCALE


class TestHandleFilterRequest:
    def test_returns_markup_for_category(self, app_container):
        response = faq.handle_filter_request(_request(app_container, term="2", instanceId="faq-x"))
        assert response.success
        assert 'id="faq-x-faq-btn-11-1"' in response.data.html
        assert 'id="faq-x-faq-btn-12-2"' in response.data.html

    def test_no_entries_is_success_with_placeholder(self, empty_container):
        response = faq.handle_filter_request(_request(empty_container, term="all"))
        assert response.success
        assert "No FAQs found." in response.data.html
        assert "<button" not in response.data.html

    def test_unknown_category_gets_placeholder(self, app_container):
        response = faq.handle_filter_request(_request(app_container, term="999"))
        assert "No FAQs found." in response.data.html

    def test_missing_token(self, app_container):
        with pytest.raises(AuthorizationError):
            faq.handle_filter_request(FilterRequest(term="all"))

    def test_bad_token(self, app_container):
        with pytest.raises(AuthorizationError):
            faq.handle_filter_request(FilterRequest(term="all", nonce="1.bogus"))

    def test_unknown_action(self, app_container):
        with pytest.raises(ValidationError):
            faq.handle_filter_request(_request(app_container, action="something_else"))

    def test_categories(self, app_container):
        items = faq.get_categories().items
        assert [i.value for i in items] == ["all", "2", "1"]


class TestHttpApp:
    @pytest.fixture
    def client(self, app_container):
        with TestClient(create_app()) as client:
            yield client

    def _form(self, container, **fields):
        form = {"action": AJAX_ACTION, "nonce": container.tokens.issue(AJAX_ACTION), "term": "all", "instanceId": "faq-http"}
        form.update(fields)
        return form

    def test_success_envelope(self, client, app_container):
        resp = client.post("/ajax", data=self._form(app_container, term="1"))
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["data"]["html"].count("<button") == 2

    def test_authorization_failure(self, client, app_container):
        resp = client.post("/ajax", data=self._form(app_container, nonce=""))
        assert resp.status_code == 403
        body = resp.json()
        assert body["success"] is False
        assert body["data"]["code"] == "invalid_token"
        assert "html" not in body["data"]

    def test_unknown_action(self, client, app_container):
        resp = client.post("/ajax", data=self._form(app_container, action="nope"))
        assert resp.status_code == 400
        assert resp.json()["data"]["code"] == "unknown_action"

    def test_same_markup_for_repeated_requests(self, client, app_container):
        first = client.post("/ajax", data=self._form(app_container, term="2")).json()
        second = client.post("/ajax", data=self._form(app_container, term="2")).json()
        assert first == second

    def test_page(self, client):
        resp = client.get("/", params={"term": "1", "heading": "Questions"})
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "window.FAQ_FILTER" in resp.text
        assert 'type="application/ld+json"' in resp.text

    def test_categories(self, client):
        resp = client.get("/categories")
        assert resp.json()["items"][0] == {"value": "all", "label": "All"}

    def test_non_ascii_token_is_rejected(self, client, app_container):
        resp = client.post("/ajax", data=self._form(app_container, nonce="9999999999.été"))
        assert resp.status_code == 403
        assert resp.json()["data"]["code"] == "invalid_token"

    def test_oversized_term_gets_placeholder(self, client, app_container):
        resp = client.post("/ajax", data=self._form(app_container, term="9" * 5000))
        assert resp.status_code == 200
        assert "No FAQs found." in resp.json()["data"]["html"]

    def test_oversized_schema_max(self, client):
        resp = client.get("/", params={"schema_max": "9" * 25})
        assert resp.status_code == 200
        assert 'type="application/ld+json"' in resp.text


class TestStartup:
    def test_expired_cache_rows_purged(self, app_container):
        app_container.cache_repo.set("faq_markup_old", "<p>old</p>", ttl=-60)
        app_container.cache_repo.set("faq_markup_live", "<p>live</p>", ttl=60)

        with TestClient(create_app()):
            keys = [r[0] for r in app_container.cache_repo.fetchall("SELECT key FROM markup_cache")]
            assert keys == ["faq_markup_live"]
