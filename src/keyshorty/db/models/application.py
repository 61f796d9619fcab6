"""Applications table, one row per program whose shortcuts are tracked."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from keyshorty.db.base import Base


class ApplicationRow(Base):
    __tablename__ = "applications"
    # AUTOINCREMENT keeps ids monotonic even after deletes
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
