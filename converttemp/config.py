from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings

from converttemp.core.units import TemperatureUnit
from converttemp.core.validator import DEFAULT_CEILING


class Settings(BaseSettings):
    app_name: str = "ConvertTemp"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    log_level: str = "INFO"
    default_unit: TemperatureUnit = TemperatureUnit.CELSIUS  # when no locale is sent
    upper_bound: float = DEFAULT_CEILING  # in the reading's own unit
    max_input_length: int = 64  # characters

    class Config:
        env_prefix = "CONVERTTEMP_"

    @field_validator("default_unit", mode="before")
    @classmethod
    def unit_from_code(cls, v: object) -> object:
        if isinstance(v, str):
            return TemperatureUnit.parse_code(v)
        return v

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Unknown log level: {v!r}. Valid: {sorted(valid_levels)}")
        return v.upper()

    @field_validator("upper_bound")
    @classmethod
    def bound_positive(cls, v: float) -> float:
        if not v > 0:
            raise ValueError("upper_bound must be a positive number")
        return v


settings = Settings()
