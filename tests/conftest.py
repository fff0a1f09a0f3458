import os
from datetime import datetime, timedelta, timezone

TEST_DB_FILE = "test_language_classes.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"

# point the app's own engine at the test database before it is imported
os.environ["DATABASE_URL"] = TEST_DB_URL

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.deps import get_db
from app.db.base import Base
from app.main import app
from app.models.booking import Booking
from app.models.instructor import Instructor
from app.models.language_class import APPROVED, LanguageClass, PENDING
from app.models.payment import Payment
from app.models.review import Review
from app.models.user import User

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def seed_data():
    """Seed a clean minimal dataset for each test and hand back its ids."""
    db = TestingSessionLocal()
    try:
        # Clear tables (child -> parent)
        db.query(Payment).delete()
        db.query(Booking).delete()
        db.query(LanguageClass).delete()
        db.query(Instructor).delete()
        db.query(Review).delete()
        db.query(User).delete()
        db.commit()

        # Users
        student = User(email="student1@example.com", name="Student One", role="student")
        other_student = User(email="student2@example.com", name="Student Two", role="student")
        instructor = User(email="instructor1@example.com", name="Ana", role="instructor")
        admin = User(email="admin@example.com", name="Admin", role="admin")
        newcomer = User(email="newcomer@example.com", name="No Role Yet")
        db.add_all([student, other_student, instructor, admin, newcomer])

        # Instructors: seven, so the popular list has something to cut
        db.add_all(
            [
                Instructor(email="instructor1@example.com", name="Ana", image="ana.png"),
                Instructor(email="instructor2@example.com", name="Ben", image="ben.png"),
                Instructor(email="instructor3@example.com", name="Cara", image="cara.png"),
            ]
            + [
                Instructor(email=f"idle{i}@example.com", name=f"Idle {i}")
                for i in range(4)
            ]
        )

        # Classes
        spanish = LanguageClass(
            name="Spanish A1",
            instructor_name="Ana",
            instructor_email="instructor1@example.com",
            price=49.99,
            available_seats=10,
            students=5,
            status=APPROVED,
        )
        italian = LanguageClass(
            name="Italian A1",
            instructor_name="Ana",
            instructor_email="instructor1@example.com",
            price=39.0,
            available_seats=5,
            students=7,
            status=PENDING,
        )
        french = LanguageClass(
            name="French B2",
            instructor_name="Ben",
            instructor_email="instructor2@example.com",
            price=59.0,
            available_seats=3,
            students=20,
            status=APPROVED,
        )
        german = LanguageClass(
            name="German C1",
            instructor_name="Cara",
            instructor_email="instructor3@example.com",
            price=69.0,
            available_seats=0,
            students=8,
            status=APPROVED,
        )
        db.add_all([spanish, italian, french, german])

        # Reviews (inserted out of date order on purpose)
        now = datetime.now(timezone.utc)
        db.add_all(
            [
                Review(name="Old", details="fine", rating=3, date=now - timedelta(days=10)),
                Review(name="Newest", details="great", rating=5, date=now),
                Review(name="Middle", details="good", rating=4, date=now - timedelta(days=2)),
            ]
        )
        db.commit()

        # Booking for student1 on Spanish
        booking = Booking(student_email=student.email, class_id=spanish.id)
        db.add(booking)
        db.commit()

        yield {
            "student_id": student.id,
            "instructor_id": instructor.id,
            "newcomer_id": newcomer.id,
            "spanish_id": spanish.id,
            "italian_id": italian.id,
            "french_id": french.id,
            "german_id": german.id,
            "booking_id": booking.id,
        }
    finally:
        db.close()


@pytest.fixture()
def client():
    """Test client that uses the test DB session via dependency override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def token_for(client, email: str) -> str:
    r = client.post("/jwt", json={"email": email})
    assert r.status_code == 200, r.text
    return r.json()["token"]


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def student_headers(client):
    return auth_header(token_for(client, "student1@example.com"))


@pytest.fixture()
def instructor_headers(client):
    return auth_header(token_for(client, "instructor1@example.com"))


@pytest.fixture()
def admin_headers(client):
    return auth_header(token_for(client, "admin@example.com"))
