import logging
from dataclasses import dataclass

import jwt
from fastapi import Header, HTTPException, status

from app.core.security import decode_access_token
from app.schemas.base import normalize_email

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    email: str


def unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="unauthorized access",
    )


def forbidden() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="forbidden access",
    )


def get_current_identity(authorization: str | None = Header(None)) -> Identity:
    if not authorization:
        raise unauthorized()

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise unauthorized()

    try:
        claims = decode_access_token(token.strip())
    except jwt.PyJWTError as exc:
        logger.info("rejected bearer token: %s", exc)
        raise forbidden()

    email = claims.get("email")
    if not isinstance(email, str) or not email:
        raise forbidden()

    return Identity(email=normalize_email(email))
