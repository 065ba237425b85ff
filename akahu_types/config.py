"""Configuration management for akahu-types."""

import os
from dataclasses import dataclass, field

from akahu_types.exceptions import ConfigurationError


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class GeneratorConfig:
    """Synthetic data generator configuration."""

    seed: int | None = None
    locale: str = "en_NZ"
    identifier_length: int = 24  # characters after the kind prefix

    def __post_init__(self) -> None:
        if self.identifier_length < 1:
            raise ConfigurationError(
                f"identifier_length must be positive, got {self.identifier_length}"
            )


@dataclass
class AkahuTypesConfig:
    """Main configuration for akahu-types."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AkahuTypesConfig":
        """Create config from environment variables."""
        generator = GeneratorConfig(
            seed=_env_int("AKAHU_TYPES_SEED", None),
            locale=os.getenv("AKAHU_TYPES_LOCALE", "en_NZ"),
            identifier_length=_env_int("AKAHU_TYPES_ID_LENGTH", 24),
        )

        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            generator=generator,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )
