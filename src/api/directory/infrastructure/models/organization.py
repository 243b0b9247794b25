"""SQLAlchemy ORM model for the organization table.

Organizations are owned elsewhere; the directory reads ``refid`` and
``domain`` for scoping and never writes here.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class OrganizationModel(Base, TimestampMixin):
    """ORM model for the ``organization`` relation."""

    __tablename__ = "organization"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    refid: Mapped[str] = mapped_column(String(26), nullable=False, unique=True)
    company: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    domain: Mapped[str] = mapped_column(
        String(200), nullable=False, default="", index=True
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<OrganizationModel(refid={self.refid}, domain={self.domain})>"
