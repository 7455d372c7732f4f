"""
Database models for the Countries API (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
constraint names, and exposes `target_metadata` for schema synchronization.
"""

from sqlalchemy import Integer, MetaData, PrimaryKeyConstraint, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Countries(Base):
    __tablename__ = "countries"
    __table_args__ = (PrimaryKeyConstraint("id", name="countries_pkey"),)

    # No unique constraint on code: duplicate codes are accepted
    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    code: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    emoji: Mapped[str] = mapped_column(String, nullable=False)
    continent_code: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<Countries id={self.id} code={self.code!r} name={self.name!r}>"


target_metadata = Base.metadata

__all__ = ["Base", "Countries", "target_metadata"]
