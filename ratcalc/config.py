"""
Engine configuration.

Settings are loaded from environment variables (prefix RATCALC_) or a .env
file at the project root. Environment variables take precedence over .env.
"""
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Final

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (one level up from this file)
PROJECT_ROOT = Path(__file__).parent.parent

# Signed 64-bit by default: matches the widest exact integer most hosts store
DEFAULT_INTEGER_BITS: Final[int] = 64

# 10**18 is the largest power of ten that fits a signed 64-bit integer
DEFAULT_MAX_DECIMAL_PLACES: Final[int] = 18

DEFAULT_DECIMAL_DISPLAY_PLACES: Final[int] = 6


class EngineSettings(BaseSettings):
    """
    Engine settings loaded from environment variables or .env file.
    """
    # Integer width for overflow checks (0 = arbitrary precision)
    INTEGER_BITS: int = DEFAULT_INTEGER_BITS

    # Decimal <-> fraction conversion
    MAX_DECIMAL_PLACES: int = DEFAULT_MAX_DECIMAL_PLACES
    DECIMAL_DISPLAY_PLACES: int = DEFAULT_DECIMAL_DISPLAY_PLACES

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(
        env_prefix="RATCALC_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("INTEGER_BITS")
    @classmethod
    def validate_integer_bits(cls, v: int) -> int:
        if v < 0 or v == 1:
            raise ValueError(f"INTEGER_BITS must be 0 (unbounded) or >= 2, got {v}")
        return v

    @field_validator("MAX_DECIMAL_PLACES", "DECIMAL_DISPLAY_PLACES")
    @classmethod
    def validate_places(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"decimal places must be non-negative, got {v}")
        return v


@lru_cache
def get_settings() -> EngineSettings:
    """
    Get the cached settings instance.

    Call get_settings.cache_clear() after changing the environment.
    """
    return EngineSettings()


@dataclass(frozen=True)
class ArithmeticLimits:
    """Ограничения точной арифметики, передаваемые в функции ядра.

    integer_bits=None означает произвольную точность (без Overflow).
    """

    integer_bits: int | None = DEFAULT_INTEGER_BITS
    max_decimal_places: int = DEFAULT_MAX_DECIMAL_PLACES
    decimal_display_places: int = DEFAULT_DECIMAL_DISPLAY_PLACES

    @classmethod
    def from_settings(cls, settings: EngineSettings | None = None) -> "ArithmeticLimits":
        settings = settings or get_settings()
        return cls(
            integer_bits=settings.INTEGER_BITS or None,
            max_decimal_places=settings.MAX_DECIMAL_PLACES,
            decimal_display_places=settings.DECIMAL_DISPLAY_PLACES,
        )

    @classmethod
    def unbounded(cls) -> "ArithmeticLimits":
        """Лимиты без ограничения разрядности (прозрачное повышение точности)."""
        return cls(integer_bits=None)

    @property
    def max_abs(self) -> int | None:
        """Максимальное допустимое |значение| или None, если ограничения нет."""
        if self.integer_bits is None:
            return None
        return 2 ** (self.integer_bits - 1) - 1


def resolve_limits(limits: ArithmeticLimits | None) -> ArithmeticLimits:
    """Явные лимиты или лимиты из текущих настроек."""
    if limits is not None:
        return limits
    return ArithmeticLimits.from_settings()
