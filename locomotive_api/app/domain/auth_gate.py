"""Shared-secret access classification.

Two static secrets give two tiers: the read secret grants read access, the
admin secret grants read and write access. The gate only classifies; callers
turn a denial into 401 (no valid credential) or 403 (reader on an admin
operation).
"""
from __future__ import annotations

import hmac

from locomotive_api.app.constants import AccessTier


def _matches(token: str, secret: str) -> bool:
    if not token or not secret:
        return False
    return hmac.compare_digest(token.encode("utf-8"), secret.encode("utf-8"))


class AuthGate:
    def __init__(self, read_secret: str, admin_secret: str) -> None:
        self._read_secret = read_secret
        self._admin_secret = admin_secret

    @staticmethod
    def extract_token(raw_header_value: str | None) -> str:
        """Return the credential from an Authorization header value.

        "<scheme> <value>" yields <value>; anything else (e.g. a bare secret) is returned unchanged.
        """
        if not raw_header_value:
            return ""
        parts = raw_header_value.split()
        if len(parts) == 2:
            return parts[1]
        return raw_header_value

    def allow_any(self, token: str) -> bool:
        return _matches(token, self._read_secret) or _matches(token, self._admin_secret)

    def allow_admin(self, token: str) -> bool:
        return _matches(token, self._admin_secret)

    def classify(self, token: str) -> str:
        if self.allow_admin(token):
            return AccessTier.ADMIN
        if self.allow_any(token):
            return AccessTier.READER
        return AccessTier.NONE
