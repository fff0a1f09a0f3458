from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.config import POPULAR_LIMIT
from app.core.deps import get_db
from app.models.instructor import Instructor
from app.models.language_class import LanguageClass
from app.schemas.instructor import InstructorRead, PopularInstructorRow

router = APIRouter()


@router.get("/instructors", response_model=list[InstructorRead])
def list_instructors(db: Session = Depends(get_db)):
    return db.query(Instructor).order_by(Instructor.id.asc()).all()


@router.get("/popular-instructors", response_model=list[PopularInstructorRow])
def popular_instructors(db: Session = Depends(get_db)):
    """
    Instructors ranked by students enrolled across all of their classes:
    - left join so instructors without classes count as 0
    - totalStudents descending
    - instructor id ascending (stable tie-break)
    """
    total_students = func.coalesce(func.sum(LanguageClass.students), 0).label(
        "total_students"
    )
    rows = (
        db.query(
            Instructor.name,
            Instructor.email,
            Instructor.image,
            total_students,
        )
        .outerjoin(LanguageClass, LanguageClass.instructor_email == Instructor.email)
        .group_by(Instructor.id, Instructor.name, Instructor.email, Instructor.image)
        .order_by(total_students.desc(), Instructor.id.asc())
        .limit(POPULAR_LIMIT)
        .all()
    )

    return [
        {
            "name": r.name,
            "email": r.email,
            "image": r.image,
            "total_students": int(r.total_students or 0),
        }
        for r in rows
    ]
