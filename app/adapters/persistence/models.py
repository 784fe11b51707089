"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.adapters.persistence.database import Base


class TechnicianModel(Base):
    __tablename__ = "technicians"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tech_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    region: Mapped[str | None] = mapped_column(String(10), nullable=True)
    postal: Mapped[str | None] = mapped_column(String(10), nullable=True)

    __table_args__ = (Index("idx_technicians_postal", "postal"),)


class PostalRegionModel(Base):
    __tablename__ = "postal_regions"

    postal: Mapped[str] = mapped_column(String(10), primary_key=True)
    region: Mapped[str] = mapped_column(String(10), nullable=False)
