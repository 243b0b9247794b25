"""SQLAlchemy ORM model for the user table."""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class UserModel(Base, TimestampMixin):
    """ORM model for the ``user`` relation.

    ``id`` is the internal sequence and is never mapped onto the domain
    record; ``refid`` is the public reference id.
    """

    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    refid: Mapped[str] = mapped_column(String(26), nullable=False, unique=True)
    firstname: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    lastname: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    initials: Mapped[str] = mapped_column(String(10), nullable=False, default="")
    global_: Mapped[bool] = mapped_column(
        "global", Boolean, nullable=False, default=False
    )
    password: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    salt: Mapped[str] = mapped_column(
        String(100), nullable=False, default="", index=True
    )
    reset: Mapped[str] = mapped_column(
        String(100), nullable=False, default="", index=True
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<UserModel(refid={self.refid}, email={self.email})>"
