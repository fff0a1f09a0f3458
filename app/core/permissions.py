from typing import Callable

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.current_user import Identity, forbidden, get_current_identity, unauthorized
from app.core.deps import get_db
from app.models.user import ADMIN, INSTRUCTOR, STUDENT, User
from app.schemas.base import normalize_email


def require_role(role: str) -> Callable[..., User]:
    # the user row is read on every request so role changes apply immediately
    def dependency(
        identity: Identity = Depends(get_current_identity),
        db: Session = Depends(get_db),
    ) -> User:
        user = db.query(User).filter(User.email == identity.email).first()
        if user is None or user.role != role:
            raise forbidden()
        return user

    dependency.__name__ = f"require_{role}"
    return dependency


require_student = require_role(STUDENT)
require_instructor = require_role(INSTRUCTOR)
require_admin = require_role(ADMIN)


def ensure_same_email(email: str | None, identity: Identity) -> str:
    """Stop one user from reading another's data by swapping the email parameter.

    Returns the normalized email to query with.
    """
    if email is None or normalize_email(email) != identity.email:
        raise unauthorized()
    return identity.email
