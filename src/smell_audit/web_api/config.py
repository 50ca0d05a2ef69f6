"""
Configuration settings for the API.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import Any, List

from smell_audit.core.config import ONE_MIB, IntakeConfig


def _coerce(raw: str, field_type: Any) -> Any:
    """Convert an environment string to the declared field type."""
    if field_type == bool:
        return raw.lower() in ("true", "1", "yes")
    if field_type == int:
        return int(raw)
    if field_type == List[str]:
        return [item.strip() for item in raw.split(",") if item.strip()]
    return raw


@dataclass
class Settings:
    """API Configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Intake limits for POST /analyze
    MAX_SOURCE_BYTES: int = ONE_MIB
    ALLOWED_SUFFIXES: List[str] = field(default_factory=lambda: [".ts", ".tsx"])

    def __post_init__(self):
        """Load from environment variables"""
        for key, spec in self.__dataclass_fields__.items():
            env_value = os.getenv(key)
            if env_value is not None:
                setattr(self, key, _coerce(env_value, spec.type))

    def intake(self) -> IntakeConfig:
        """Intake limits as the core understands them."""
        return IntakeConfig(
            max_source_bytes=self.MAX_SOURCE_BYTES,
            allowed_suffixes=tuple(self.ALLOWED_SUFFIXES),
        )


# Global settings instance
settings = Settings()
