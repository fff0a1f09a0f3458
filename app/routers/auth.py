from typing import Any

from fastapi import APIRouter, Body

from app.core.security import create_access_token
from app.schemas.token import Token

router = APIRouter()


@router.post("/jwt", response_model=Token)
def issue_token(payload: dict[str, Any] = Body(...)):
    # the caller already signed in with the identity provider; sign what it sends
    return {"token": create_access_token(payload)}
