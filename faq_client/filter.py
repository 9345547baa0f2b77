"""Filter endpoint client."""

import json
from typing import Any

import httpx

from faq_client.base import BaseClient
from faq_client.errors import MalformedResponseError, NetworkError
from settings import AJAX_ACTION, AJAX_PATH


def extract_html(payload: Any) -> str:
    """The html field of a success envelope, or MalformedResponseError."""
    if not isinstance(payload, dict) or payload.get("success") is not True:
        raise MalformedResponseError("Bad AJAX response")
    data = payload.get("data")
    if not isinstance(data, dict) or not isinstance(data.get("html"), str):
        raise MalformedResponseError("Bad AJAX response")
    return data["html"]


class FilterClient(BaseClient):
    """Client for the FAQ filter endpoint."""

    async def get_faqs(
        self,
        nonce: str,
        term: str,
        instance_id: str,
        ajax_url: str = AJAX_PATH,
    ) -> str:
        """POST the selection, return the markup for the results region."""
        form = {
            "action": AJAX_ACTION,
            "nonce": nonce,
            "term": term,
            "instanceId": instance_id,
        }
        try:
            payload = await self._post_form(ajax_url, form)
        except httpx.HTTPError as e:
            raise NetworkError(str(e)) from e
        except json.JSONDecodeError as e:
            raise MalformedResponseError(f"Response is not JSON: {e}") from e
        return extract_html(payload)
