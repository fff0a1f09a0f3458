from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from app.core.config import ACCESS_TOKEN_EXPIRE, ALGORITHM, SECRET_KEY


def create_access_token(data: dict[str, Any], expires_delta: timedelta = ACCESS_TOKEN_EXPIRE) -> str:
    """Sign an arbitrary claim set.

    No credential check happens here: callers are trusted to have logged in
    with the identity provider before asking for a token.
    """
    to_encode = dict(data)
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    # raises jwt.PyJWTError on bad signature, malformed token or expiry
    return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
