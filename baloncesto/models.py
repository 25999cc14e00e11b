"""Data models for basketball teams and players."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class Equipo:
    """A basketball team."""

    id: str = ""
    nombre: str = ""

    def to_json(self) -> dict[str, Any]:
        """Return the team as a JSON-ready dictionary."""
        return {"id": self.id, "nombre": self.nombre}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Equipo":
        """Build a team from a JSON object; raises KeyError on missing fields."""
        return cls(data["id"], data["nombre"])


@dataclass
class Jugador:
    """A basketball player belonging to a team."""

    id: str = ""
    nombre: str = ""
    posicion: str = ""
    nacionalidad: str = ""
    edad: str = ""
    altura: str = ""
    equipo_id: str = ""

    def to_json(self) -> dict[str, Any]:
        """Return the player as a JSON-ready dictionary."""
        return {
            "id": self.id,
            "nombre": self.nombre,
            "posicion": self.posicion,
            "nacionalidad": self.nacionalidad,
            "edad": self.edad,
            "altura": self.altura,
            "equipo_id": self.equipo_id,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Jugador":
        """Build a player from a JSON object; raises KeyError on missing fields."""
        return cls(
            data["id"],
            data["nombre"],
            data["posicion"],
            data["nacionalidad"],
            data["edad"],
            data["altura"],
            data["equipo_id"],
        )