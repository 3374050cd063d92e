from pydantic import BaseModel, Field, field_validator, model_validator
from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ─── WARTESCHLANGE ───

class QueueSettings(BaseModel):
    """Kapazität der Warteschlange und Anzahl abzufragender Lehrkräfte."""
    # Feste Kapazität der Haupt-Warteschlange (keine dynamische Vergrößerung)
    capacity: int = Field(10, ge=1, le=10_000,
        description="Kapazität der Warteschlange")
    # Wie viele Lehrkräfte der interaktive Lauf abfragt
    instructor_count: int = Field(5, ge=1,
        description="Anzahl abzufragender Lehrkräfte")

    @model_validator(mode='after')
    def _count_fits_capacity(self):
        if self.instructor_count > self.capacity:
            raise ValueError(
                f"instructor_count ({self.instructor_count}) > capacity ({self.capacity})"
            )
        return self


# ─── LOGGING ───

class LoggingSettings(BaseModel):
    """Logging-Konfiguration (Standardbibliothek ``logging``)."""
    level: LogLevel = Field(LogLevel.WARNING,
        description="Minimales Log-Level")
    format: str = Field("%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        description="Format der Log-Zeilen")

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, v):
        return v.upper() if isinstance(v, str) else v


# ─── GESAMT-CONFIG ───

class AppConfig(BaseModel):
    """Gesamtkonfiguration der Anwendung."""
    queue: QueueSettings = Field(default_factory=QueueSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
