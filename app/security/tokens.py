"""Action-bound request tokens for the filter endpoint."""

import base64
import hmac
import time
from collections.abc import Callable
from hashlib import sha256

from loguru import logger

from settings import TOKEN_SECRET, TOKEN_TTL

_DELIMITER = "."
_SIGNATURE_BYTES = 16


class TokenSigner:
    """Issues and verifies ``{expires_at}.{signature}`` tokens.

    The action name is signed but not embedded, so a token issued for one
    action never verifies for another.
    """

    def __init__(
        self,
        secret: str = TOKEN_SECRET,
        ttl: int = TOKEN_TTL,
        clock: Callable[[], float] = time.time,
    ):
        if ttl <= 0:
            raise ValueError("TTL must be a positive integer")
        self._secret = secret.encode("utf-8")
        self._ttl = ttl
        self._clock = clock

    def _signature(self, action: str, expires_at: int) -> str:
        digest = hmac.new(self._secret, f"{action}|{expires_at}".encode(), sha256).digest()
        return base64.urlsafe_b64encode(digest[:_SIGNATURE_BYTES]).decode("ascii").rstrip("=")

    def issue(self, action: str) -> str:
        expires_at = int(self._clock()) + self._ttl
        return f"{expires_at}{_DELIMITER}{self._signature(action, expires_at)}"

    def verify(self, token: str | None, action: str) -> bool:
        if not token:
            return False

        expires_raw, _, signature = token.partition(_DELIMITER)
        try:
            expires_at = int(expires_raw)
        except ValueError:
            return False

        expected = self._signature(action, expires_at)
        if not hmac.compare_digest(signature.encode(), expected.encode()):
            logger.debug("Token signature mismatch for action {}", action)
            return False
        return self._clock() <= expires_at
