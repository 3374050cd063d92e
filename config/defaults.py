from config.schema import AppConfig, LoggingSettings, LogLevel, QueueSettings


# Kapazität 10, fünf Lehrkräfte pro Lauf
DEFAULT_CAPACITY = 10
DEFAULT_INSTRUCTOR_COUNT = 5


def default_app_config() -> AppConfig:
    """Standard-Konfiguration: Kapazität 10, 5 Lehrkräfte, Log-Level WARNING."""
    return AppConfig(
        queue=QueueSettings(
            capacity=DEFAULT_CAPACITY,
            instructor_count=DEFAULT_INSTRUCTOR_COUNT,
        ),
        logging=LoggingSettings(level=LogLevel.WARNING),
    )
