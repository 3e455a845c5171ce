"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

import math
from pydantic import BaseModel, field_validator, model_validator

from converttemp.config import settings
from converttemp.core.units import TemperatureUnit


def _unit_code(v: str | None) -> str | None:
    if v is None:
        return None
    return TemperatureUnit.parse_code(v).value


class ParseRequest(BaseModel):
    text: str
    default_unit: str | None = None

    @field_validator("text")
    @classmethod
    def text_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Text cannot be empty")
        if len(v) > settings.max_input_length:
            raise ValueError(f"Text longer than {settings.max_input_length} characters")
        return v

    @field_validator("default_unit")
    @classmethod
    def known_default_unit(cls, v: str | None) -> str | None:
        return _unit_code(v)


class ConvertRequest(BaseModel):
    """Either smart-input ``text`` or a numeric ``value`` with its ``unit``."""

    text: str | None = None
    value: float | None = None
    unit: str | None = None
    default_unit: str | None = None

    @field_validator("text")
    @classmethod
    def text_length(cls, v: str | None) -> str | None:
        if v is not None and len(v) > settings.max_input_length:
            raise ValueError(f"Text longer than {settings.max_input_length} characters")
        return v

    @field_validator("value")
    @classmethod
    def must_be_finite(cls, v: float | None) -> float | None:
        if v is not None and not math.isfinite(v):
            raise ValueError("Value must be a finite number")
        return v

    @field_validator("unit", "default_unit")
    @classmethod
    def known_unit(cls, v: str | None) -> str | None:
        return _unit_code(v)

    @model_validator(mode="after")
    def text_or_value(self) -> ConvertRequest:
        if self.text is None and self.value is None:
            raise ValueError("Provide either 'text' or 'value'")
        if self.text is not None and self.value is not None:
            raise ValueError("Provide only one of 'text' or 'value'")
        if self.value is not None and self.unit is None:
            raise ValueError("'unit' is required with 'value'")
        if self.text is not None and not self.text.strip():
            raise ValueError("Text cannot be empty")
        return self


class ReadingResponse(BaseModel):
    value: float
    unit: str
    symbol: str
    explicit: bool


class ConvertResponse(BaseModel):
    input: ReadingResponse
    celsius: float
    values: dict[str, float]
    formatted: dict[str, str]


class UnitResponse(BaseModel):
    code: str
    name: str
    symbol: str
    description: str
    aliases: list[str]
    absolute_zero: float
    inverted: bool


class FormulaResponse(BaseModel):
    source: str
    target: str
    formula: str
