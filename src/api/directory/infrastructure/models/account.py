"""SQLAlchemy ORM model for the account (membership) table."""

from sqlalchemy import Boolean, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class AccountModel(Base, TimestampMixin):
    """ORM model for the ``account`` relation.

    Binds a user to an organization. A user appears in tenant listings only
    while the membership is active. The directory deletes rows here on
    deactivation and otherwise only reads them.
    """

    __tablename__ = "account"
    __table_args__ = (UniqueConstraint("userid", "orgid", name="uq_account_user_org"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    userid: Mapped[str] = mapped_column(String(26), nullable=False, index=True)
    orgid: Mapped[str] = mapped_column(String(26), nullable=False, index=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<AccountModel(userid={self.userid}, orgid={self.orgid}, "
            f"active={self.active})>"
        )
