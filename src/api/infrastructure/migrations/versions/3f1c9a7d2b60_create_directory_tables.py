"""create directory tables

Create the user table owned by the directory, plus the account,
organization and labelrole relations it reads for tenant scoping.

Revision ID: 3f1c9a7d2b60
Revises:
Create Date: 2026-10-18 09:12:40.318204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b60"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created", sa.DateTime(timezone=True), nullable=False),
        sa.Column("revised", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "user",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("refid", sa.String(length=26), nullable=False),
        sa.Column("firstname", sa.String(length=500), nullable=False),
        sa.Column("lastname", sa.String(length=500), nullable=False),
        sa.Column("email", sa.String(length=500), nullable=False),
        sa.Column("initials", sa.String(length=10), nullable=False),
        sa.Column("global", sa.Boolean(), nullable=False),
        sa.Column("password", sa.String(length=500), nullable=False),
        sa.Column("salt", sa.String(length=100), nullable=False),
        sa.Column("reset", sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("refid"),
    )
    op.create_index(op.f("ix_user_email"), "user", ["email"])
    op.create_index(op.f("ix_user_salt"), "user", ["salt"])
    op.create_index(op.f("ix_user_reset"), "user", ["reset"])

    op.create_table(
        "organization",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("refid", sa.String(length=26), nullable=False),
        sa.Column("company", sa.String(length=500), nullable=False),
        sa.Column("domain", sa.String(length=200), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("refid"),
    )
    op.create_index(op.f("ix_organization_domain"), "organization", ["domain"])

    op.create_table(
        "account",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("userid", sa.String(length=26), nullable=False),
        sa.Column("orgid", sa.String(length=26), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("userid", "orgid", name="uq_account_user_org"),
    )
    op.create_index(op.f("ix_account_userid"), "account", ["userid"])
    op.create_index(op.f("ix_account_orgid"), "account", ["orgid"])

    op.create_table(
        "labelrole",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("orgid", sa.String(length=26), nullable=False),
        sa.Column("labelid", sa.String(length=26), nullable=False),
        sa.Column("userid", sa.String(length=26), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("orgid", "labelid", "userid", name="uq_labelrole_grant"),
    )
    op.create_index(op.f("ix_labelrole_orgid"), "labelrole", ["orgid"])
    op.create_index(op.f("ix_labelrole_labelid"), "labelrole", ["labelid"])
    op.create_index(op.f("ix_labelrole_userid"), "labelrole", ["userid"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_labelrole_userid"), table_name="labelrole")
    op.drop_index(op.f("ix_labelrole_labelid"), table_name="labelrole")
    op.drop_index(op.f("ix_labelrole_orgid"), table_name="labelrole")
    op.drop_table("labelrole")
    op.drop_index(op.f("ix_account_orgid"), table_name="account")
    op.drop_index(op.f("ix_account_userid"), table_name="account")
    op.drop_table("account")
    op.drop_index(op.f("ix_organization_domain"), table_name="organization")
    op.drop_table("organization")
    op.drop_index(op.f("ix_user_reset"), table_name="user")
    op.drop_index(op.f("ix_user_salt"), table_name="user")
    op.drop_index(op.f("ix_user_email"), table_name="user")
    op.drop_table("user")
