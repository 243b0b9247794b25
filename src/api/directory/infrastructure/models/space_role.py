"""SQLAlchemy ORM model for the labelrole (space role) table."""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class SpaceRoleModel(Base, TimestampMixin):
    """ORM model for the ``labelrole`` relation.

    Grants a user visibility into a space (``labelid``) of an organization.
    """

    __tablename__ = "labelrole"
    __table_args__ = (
        UniqueConstraint("orgid", "labelid", "userid", name="uq_labelrole_grant"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    orgid: Mapped[str] = mapped_column(String(26), nullable=False, index=True)
    labelid: Mapped[str] = mapped_column(String(26), nullable=False, index=True)
    userid: Mapped[str] = mapped_column(String(26), nullable=False, index=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<SpaceRoleModel(orgid={self.orgid}, labelid={self.labelid}, "
            f"userid={self.userid})>"
        )
