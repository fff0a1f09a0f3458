"""initial schema

Revision ID: 7c1e2b9d4f10
Revises:
Create Date: 2026-10-19 13:20:11.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c1e2b9d4f10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("image", sa.String(length=1024), nullable=True),
        sa.Column("role", sa.String(length=50), nullable=True),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "instructors",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("image", sa.String(length=1024), nullable=True),
    )
    op.create_index("ix_instructors_id", "instructors", ["id"])
    op.create_index("ix_instructors_email", "instructors", ["email"], unique=True)

    op.create_table(
        "classes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("image", sa.String(length=1024), nullable=True),
        sa.Column("instructor_name", sa.String(length=255), nullable=True),
        sa.Column("instructor_email", sa.String(length=255), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("available_seats", sa.Integer(), nullable=False),
        sa.Column("students", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("feedback", sa.Text(), nullable=True),
        sa.CheckConstraint("available_seats >= 0", name="ck_classes_available_seats"),
        sa.CheckConstraint("students >= 0", name="ck_classes_students"),
    )
    op.create_index("ix_classes_id", "classes", ["id"])
    op.create_index("ix_classes_instructor_email", "classes", ["instructor_email"])

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("image", sa.String(length=1024), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("details", sa.Text(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_reviews_id", "reviews", ["id"])
    op.create_index("ix_reviews_date", "reviews", ["date"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("student_email", sa.String(length=255), nullable=False),
        sa.Column("class_id", sa.Integer(), sa.ForeignKey("classes.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("student_email", "class_id", name="uq_bookings_student_class"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_bookings_id", "bookings", ["id"])
    op.create_index("ix_bookings_student_email", "bookings", ["student_email"])
    op.create_index("ix_bookings_class_id", "bookings", ["class_id"])

    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("class_id", sa.Integer(), sa.ForeignKey("classes.id"), nullable=False),
        sa.Column("booking_id", sa.Integer(), nullable=False, unique=True),
        sa.Column("transaction_id", sa.String(length=255), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_payments_id", "payments", ["id"])
    op.create_index("ix_payments_email", "payments", ["email"])
    op.create_index("ix_payments_class_id", "payments", ["class_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("payments")
    op.drop_table("bookings")
    op.drop_table("reviews")
    op.drop_table("classes")
    op.drop_table("instructors")
    op.drop_table("users")
