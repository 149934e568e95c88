"""Create recruitment schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("role_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("role_id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "person",
        sa.Column("person_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("surname", sa.String(255), nullable=True),
        sa.Column("pnr", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("role_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["role_id"], ["role.role_id"]),
        sa.PrimaryKeyConstraint("person_id"),
    )
    op.create_index("ix_person_username", "person", ["username"], unique=True)
    op.create_index("ix_person_email", "person", ["email"], unique=False)

    op.create_table(
        "competence",
        sa.Column("competence_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("competence_id"),
    )

    op.create_table(
        "competence_profile",
        sa.Column(
            "competence_profile_id", sa.Integer(), autoincrement=True, nullable=False
        ),
        sa.Column("person_id", sa.Integer(), nullable=False),
        sa.Column("competence_id", sa.Integer(), nullable=False),
        sa.Column("years_of_experience", sa.Numeric(4, 2), nullable=False),
        sa.ForeignKeyConstraint(["person_id"], ["person.person_id"]),
        sa.ForeignKeyConstraint(["competence_id"], ["competence.competence_id"]),
        sa.PrimaryKeyConstraint("competence_profile_id"),
    )
    op.create_index(
        "ix_competence_profile_person_id", "competence_profile", ["person_id"]
    )

    op.create_table(
        "availability",
        sa.Column("availability_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("person_id", sa.Integer(), nullable=False),
        sa.Column("from_date", sa.Date(), nullable=False),
        sa.Column("to_date", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["person_id"], ["person.person_id"]),
        sa.PrimaryKeyConstraint("availability_id"),
    )
    op.create_index("ix_availability_person_id", "availability", ["person_id"])

    op.create_table(
        "application",
        sa.Column("application_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("person_id", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["person_id"], ["person.person_id"]),
        sa.PrimaryKeyConstraint("application_id"),
        sa.UniqueConstraint("person_id"),
    )
    op.create_index("ix_application_status", "application", ["status"])
    op.create_index("ix_application_created_at", "application", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_application_created_at", table_name="application")
    op.drop_index("ix_application_status", table_name="application")
    op.drop_table("application")
    op.drop_index("ix_availability_person_id", table_name="availability")
    op.drop_table("availability")
    op.drop_index("ix_competence_profile_person_id", table_name="competence_profile")
    op.drop_table("competence_profile")
    op.drop_table("competence")
    op.drop_index("ix_person_email", table_name="person")
    op.drop_index("ix_person_username", table_name="person")
    op.drop_table("person")
    op.drop_table("role")
