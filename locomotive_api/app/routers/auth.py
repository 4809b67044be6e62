"""Route dependencies enforcing the read and admin tiers.

No valid credential -> 401. Valid reader credential on an admin route -> 403.
"""
from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request, status
from loguru import logger

from locomotive_api.app.constants import AccessTier
from locomotive_api.app.core import SERVICE_NAME
from locomotive_api.app.domain.auth_gate import AuthGate


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).warning("")


def _resolve_tier(request: Request) -> str:
    gate: AuthGate | None = getattr(request.app.state, "auth_gate", None)
    if gate is None:
        _log("auth_gate_missing", path=request.url.path)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Auth not available")
    token = gate.extract_token(request.headers.get("Authorization"))
    return gate.classify(token)


def _unauthorized(request: Request) -> HTTPException:
    _log("auth_denied", method=request.method, path=request.url.path, status_code=401)
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def require_reader(request: Request) -> str:
    tier = _resolve_tier(request)
    if tier == AccessTier.NONE:
        raise _unauthorized(request)
    return tier


async def require_admin(request: Request) -> str:
    tier = _resolve_tier(request)
    if tier == AccessTier.NONE:
        raise _unauthorized(request)
    if tier != AccessTier.ADMIN:
        _log("auth_denied", method=request.method, path=request.url.path, status_code=403, tier=tier)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return tier
