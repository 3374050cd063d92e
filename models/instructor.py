"""Datenmodell für eine Lehrkraft in der Warteschlange (Pydantic v2)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from models.errors import InvalidArgumentError


class Instructor(BaseModel):
    """Unveränderlicher Eintrag: Vorname, Nachname, Anzahl Kurse.

    Strikte Typen: "3", 3.0 oder True werden nicht zu einer Kursanzahl
    umgewandelt. Jeder Validierungsfehler (Konstruktor oder model_validate)
    wird als InvalidArgumentError gemeldet.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    first_name: str
    last_name: str
    num_courses: int = Field(ge=0)

    def __init__(self, first_name=None, last_name=None, num_courses=None, **data):
        try:
            super().__init__(
                first_name=first_name, last_name=last_name,
                num_courses=num_courses, **data,
            )
        except ValidationError as e:
            raise _as_invalid_argument(e) from e

    @classmethod
    def model_validate(cls, obj: Any, **kwargs) -> "Instructor":
        try:
            return super().model_validate(obj, **kwargs)
        except ValidationError as e:
            raise _as_invalid_argument(e) from e

    @field_validator("first_name", "last_name")
    @classmethod
    def _not_blank(cls, v: str, info) -> str:
        # Gespeichert wird der Originalwert, geprüft der getrimmte
        if not v.strip():
            label = "Vorname" if info.field_name == "first_name" else "Nachname"
            raise ValueError(f"{label} darf nicht leer sein")
        return v

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}, Courses: {self.num_courses}"


def _as_invalid_argument(error: ValidationError) -> InvalidArgumentError:
    """Übersetzt einen Pydantic-Fehler in InvalidArgumentError.

    Stammt der Fehler bereits aus einem verschachtelten Konstruktor-Aufruf,
    wird dessen Meldung unverändert übernommen.
    """
    first = error.errors()[0]
    inner = first.get("ctx", {}).get("error")
    if isinstance(inner, InvalidArgumentError):
        return InvalidArgumentError(str(inner))
    loc = ".".join(str(part) for part in first.get("loc", ()))
    msg = first.get("msg", "")
    return InvalidArgumentError(
        f"Ungültige Lehrkraft: {loc}: {msg}" if loc else f"Ungültige Lehrkraft: {msg}"
    )
