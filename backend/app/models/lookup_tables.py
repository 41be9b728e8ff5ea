"""Lookup Tables — small reference tables named by catalogue entities.

Invariants:
    - Rows are immutable reference data; the API never writes them
    - Language.iso_code_3 is the ISO 639-3 code exposed in alias payloads
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Language(Base):
    __tablename__ = "languages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    iso_code_3: Mapped[str] = mapped_column(String(3), nullable=False)


class Area(Base):
    __tablename__ = "areas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class Gender(Base):
    __tablename__ = "genders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)


class AuthorType(Base):
    """Author sub-type, e.g. Person or Group."""
    __tablename__ = "author_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(50), nullable=False)
