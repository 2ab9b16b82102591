"""
food_ordering.accounts.tokens
Signed, time-limited session tokens carried in an HTTP-only cookie.

The token is a django.core.signing payload {"id": <user id>} with an embedded
timestamp; verification enforces SESSION_TOKEN_MAX_AGE.
"""
from __future__ import annotations

from typing import Optional

from django.conf import settings
from django.core import signing
from django.http import HttpResponse

from food_ordering.errors import InvalidToken, MissingToken

TOKEN_SALT = "food_ordering.accounts.session"


def _key() -> str:
    return settings.SESSION_TOKEN_SECRET


def issue_token(user_id: int) -> str:
    return signing.dumps({"id": user_id}, key=_key(), salt=TOKEN_SALT, compress=True)


def verify_token(token: Optional[str]) -> int:
    """
    Return the user id carried by `token`.

    Raises MissingToken when nothing was presented and InvalidToken when the
    signature, the expiry or the payload does not check out.
    """
    if not token:
        raise MissingToken()
    try:
        payload = signing.loads(
            token, key=_key(), salt=TOKEN_SALT, max_age=settings.SESSION_TOKEN_MAX_AGE
        )
    except signing.BadSignature:  # includes SignatureExpired
        raise InvalidToken()

    user_id = payload.get("id") if isinstance(payload, dict) else None
    if not isinstance(user_id, int):
        raise InvalidToken()
    return user_id


def set_session_cookie(response: HttpResponse, user_id: int) -> HttpResponse:
    response.set_cookie(
        settings.SESSION_TOKEN_COOKIE_NAME,
        issue_token(user_id),
        max_age=settings.SESSION_TOKEN_MAX_AGE,
        httponly=True,
        samesite=settings.SESSION_TOKEN_COOKIE_SAMESITE,
        secure=settings.SESSION_TOKEN_COOKIE_SECURE,
    )
    return response


def clear_session_cookie(response: HttpResponse) -> HttpResponse:
    response.delete_cookie(
        settings.SESSION_TOKEN_COOKIE_NAME,
        samesite=settings.SESSION_TOKEN_COOKIE_SAMESITE,
    )
    return response
