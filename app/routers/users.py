from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.core.current_user import Identity, get_current_identity
from app.core.deps import get_db
from app.core.permissions import ensure_same_email, require_admin
from app.models.user import ADMIN, INSTRUCTOR, STUDENT, User
from app.schemas.token import Message
from app.schemas.user import UserCreate, UserRead, UserRoleRead

router = APIRouter()


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def _grant_role(db: Session, user_id: int, role: str) -> User:
    user = _get_user_or_404(db, user_id)
    user.role = role
    db.commit()
    db.refresh(user)
    return user


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={200: {"model": Message, "description": "User already exists"}},
)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    existing_user = db.query(User).filter(User.email == payload.email).first()
    if existing_user:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"message": "user already exists"},
        )

    user = User(**payload.model_dump())
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@router.get("", response_model=list[UserRead])
def list_users(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return db.query(User).order_by(User.id.asc()).all()


@router.get("/role/{email}", response_model=UserRoleRead)
def user_role(
    email: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    email = ensure_same_email(email, identity)

    user = db.query(User).filter(User.email == email).first()
    role = user.role if user else None
    return UserRoleRead(
        is_student=role == STUDENT,
        is_instructor=role == INSTRUCTOR,
        is_admin=role == ADMIN,
    )


@router.patch("/{user_id}/make-instructor", response_model=UserRead)
def make_instructor(
    user_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return _grant_role(db, user_id, INSTRUCTOR)


@router.patch("/{user_id}/make-admin", response_model=UserRead)
def make_admin(
    user_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return _grant_role(db, user_id, ADMIN)


# Older clients grant roles through bare PATCH / PUT on the user.
router.add_api_route(
    "/{user_id}", make_instructor, methods=["PATCH"], response_model=UserRead
)
router.add_api_route(
    "/{user_id}", make_admin, methods=["PUT"], response_model=UserRead
)
