from datetime import datetime, timedelta, timezone

import jwt

from mentors_api.core import config


def create_access_token(
    user_id: int,
    email: str | None = None,
    *,
    secret: str | None = None,
    expires_minutes: int | None = None,
    now: datetime | None = None,
) -> str:
    issued_at = now or datetime.now(timezone.utc)
    expire_minutes = expires_minutes or config.settings.jwt_expires_minutes
    payload = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=expire_minutes),
    }
    if email is not None:
        payload["email"] = email
    return jwt.encode(payload, secret or config.settings.jwt_secret, algorithm=config.settings.jwt_algorithm)


def decode_access_token(token: str, *, secret: str | None = None, now: datetime | None = None) -> dict:
    """Verify ``token`` and return its claims.

    Expiry is checked against ``now`` (current UTC time when omitted) instead
    of PyJWT's own clock so callers can pin the time. Raises a subclass of
    ``jwt.InvalidTokenError`` when the token is malformed, tampered with,
    expired or missing ``sub``/``exp``.
    """
    payload = jwt.decode(
        token,
        secret or config.settings.jwt_secret,
        algorithms=[config.settings.jwt_algorithm],
        options={"require": ["sub", "exp"], "verify_exp": False, "verify_iat": False},
    )
    current = now or datetime.now(timezone.utc)
    if payload["exp"] <= current.timestamp():
        raise jwt.ExpiredSignatureError("Signature has expired")
    return payload
