"""
Pokedex Backend - Pokemon SQLAlchemy Model
===========================================

What:  ORM model representing the `pokemon` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads it for migrations.
Who:   Used by PokemonRepository for every store operation.

Table Design:
    - id: integer identity assigned by the database
    - name: lookup key for GET /pokemon/{name}; indexed, NOT unique
      (duplicate names are accepted and the first match wins on lookup)
    - type: free-form category label ("Electric", "Fire/Flying", ...)
"""

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Pokemon(Base):
    """
    A single Pokemon record.

    Lifecycle:
        1. Inserted by POST /pokemon
        2. Read by the list, count and lookup endpoints
        3. Removed only in bulk by DELETE /pokemon (no update, no single delete)
    """

    __tablename__ = "pokemon"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Database-assigned identity",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Pokemon name, used for exact-match lookups",
    )

    type: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Free-form type label",
    )

    __table_args__ = (
        Index("idx_pokemon_name", "name"),
    )

    def __repr__(self) -> str:
        return f"<Pokemon(id={self.id}, name='{self.name}', type='{self.type}')>"
