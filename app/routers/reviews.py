from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.current_user import Identity, get_current_identity
from app.core.deps import get_db
from app.models.review import Review
from app.schemas.review import ReviewCreate, ReviewRead

router = APIRouter()


@router.get("", response_model=list[ReviewRead])
def list_reviews(db: Session = Depends(get_db)):
    return db.query(Review).order_by(Review.date.desc(), Review.id.desc()).all()


@router.post("", response_model=ReviewRead, status_code=status.HTTP_201_CREATED)
def create_review(
    payload: ReviewCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    data = payload.model_dump(exclude_none=True)
    review = Review(**data)
    db.add(review)
    db.commit()
    db.refresh(review)
    return review
