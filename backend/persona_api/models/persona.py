"""Persona ORM - the single managed entity.

Invariants:
    - id is an integer primary key assigned by the store on insert, never changed after
    - nombre, apellido and edad are the only mutable fields
    - edad is never NULL (missing ages are stored as 0)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from persona_api.db.base import Base


class Persona(Base):
    """A person record: given name, family name and age."""
    __tablename__ = "personas"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    nombre: Mapped[str | None] = mapped_column(String(255), nullable=True)
    apellido: Mapped[str | None] = mapped_column(String(255), nullable=True)
    edad: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0",
    )

    def __repr__(self) -> str:
        return (
            f"Persona(id={self.id!r}, nombre={self.nombre!r}, "
            f"apellido={self.apellido!r}, edad={self.edad!r})"
        )
