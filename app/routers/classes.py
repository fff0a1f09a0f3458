from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.core.config import POPULAR_LIMIT
from app.core.current_user import Identity, get_current_identity
from app.core.deps import get_db
from app.core.permissions import ensure_same_email, require_admin, require_student
from app.models.language_class import APPROVED, DENIED, LanguageClass, PENDING
from app.models.payment import Payment
from app.models.user import User
from app.schemas.language_class import ClassCreate, ClassFeedback, ClassRead, ClassUpdate

router = APIRouter()


def _get_class_or_404(db: Session, class_id: int) -> LanguageClass:
    language_class = db.query(LanguageClass).filter(LanguageClass.id == class_id).first()
    if not language_class:
        raise HTTPException(status_code=404, detail="Class not found")
    return language_class


def _set_status(db: Session, class_id: int, new_status: str) -> LanguageClass:
    language_class = _get_class_or_404(db, class_id)
    language_class.status = new_status
    db.commit()
    db.refresh(language_class)
    return language_class


@router.get("/classes", response_model=list[ClassRead])
def list_classes(
    status_filter: str | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    query = db.query(LanguageClass)
    if status_filter:
        query = query.filter(LanguageClass.status == status_filter)
    return query.order_by(LanguageClass.id.asc()).all()


@router.get("/popular-classes", response_model=list[ClassRead])
def popular_classes(db: Session = Depends(get_db)):
    return (
        db.query(LanguageClass)
        .order_by(LanguageClass.students.desc(), LanguageClass.id.asc())
        .limit(POPULAR_LIMIT)
        .all()
    )


@router.get("/classes/{email}", response_model=list[ClassRead])
def instructor_classes(
    email: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    email = ensure_same_email(email, identity)
    return (
        db.query(LanguageClass)
        .filter(LanguageClass.instructor_email == email)
        .order_by(LanguageClass.id.asc())
        .all()
    )


@router.get("/enrolled-classes", response_model=list[ClassRead])
def enrolled_classes(
    email: str | None = None,
    db: Session = Depends(get_db),
    student: User = Depends(require_student),
    identity: Identity = Depends(get_current_identity),
):
    email = ensure_same_email(email, identity)

    # enrollment is not stored; it is whatever the student has paid for
    class_ids = [
        row.class_id
        for row in db.query(Payment.class_id).filter(Payment.email == email).distinct()
    ]
    if not class_ids:
        return []
    return (
        db.query(LanguageClass)
        .filter(LanguageClass.id.in_(class_ids))
        .order_by(LanguageClass.id.asc())
        .all()
    )


@router.post("/classes", response_model=ClassRead, status_code=status.HTTP_201_CREATED)
def create_class(
    payload: ClassCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    ensure_same_email(payload.instructor_email, identity)

    language_class = LanguageClass(
        **payload.model_dump(),
        status=PENDING,
        students=0,
    )
    db.add(language_class)
    db.commit()
    db.refresh(language_class)
    return language_class


@router.patch("/classes/update/{class_id}", response_model=ClassRead)
def update_class(
    class_id: int,
    payload: ClassUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    language_class = _get_class_or_404(db, class_id)
    ensure_same_email(language_class.instructor_email, identity)

    for field_name, value in payload.model_dump(exclude_unset=True).items():
        setattr(language_class, field_name, value)

    db.commit()
    db.refresh(language_class)
    return language_class


@router.patch("/classes/{class_id}/approve", response_model=ClassRead)
def approve_class(
    class_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return _set_status(db, class_id, APPROVED)


@router.patch("/classes/{class_id}/deny", response_model=ClassRead)
def deny_class(
    class_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return _set_status(db, class_id, DENIED)


@router.patch("/classes/{class_id}/feedback", response_model=ClassRead)
def class_feedback(
    class_id: int,
    payload: ClassFeedback,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    language_class = _get_class_or_404(db, class_id)
    language_class.feedback = payload.feedback
    db.commit()
    db.refresh(language_class)
    return language_class


# Older clients use the HTTP verb to pick the admin action.
router.add_api_route(
    "/classes/feedback/{class_id}", class_feedback, methods=["PATCH"], response_model=ClassRead
)
router.add_api_route(
    "/classes/{class_id}", approve_class, methods=["PATCH"], response_model=ClassRead
)
router.add_api_route(
    "/classes/{class_id}", deny_class, methods=["PUT"], response_model=ClassRead
)
