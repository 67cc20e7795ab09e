"""Request authentication for the post routes."""
from typing import Optional

from fastapi import Request

import config
from errors import BlogError
from logger import get_logger
from security import Identity, decode_access_token

log = get_logger(__name__)

BEARER_PREFIX = "bearer "


def extract_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from a ``bearer <token>`` header, or None if no credential was sent"""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


def authenticate(authorization: Optional[str], secret: str = config.SECRET_KEY) -> Optional[Identity]:
    """Resolve the identity behind an Authorization header.

    A missing or differently scoped header yields None. A supplied token that
    fails verification raises InvalidToken or ExpiredToken.
    """
    token = extract_token(authorization)
    if token is None:
        return None
    return decode_access_token(token, secret)


def token_extractor(request: Request) -> Optional[Identity]:
    """Dependency that authenticates the request before the route body runs"""
    try:
        identity = authenticate(request.headers.get("Authorization"))
    except BlogError as exc:
        log.warning("Rejected token on %s %s: %s", request.method, request.url.path, exc.message)
        raise
    request.state.identity = identity
    return identity
