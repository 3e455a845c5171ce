"""Parse and convert endpoints for smart temperature input."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Header, HTTPException

from converttemp.config import settings
from converttemp.core.errors import OutOfRangeError, ParseError
from converttemp.core.parser import Reading, parse
from converttemp.core.pipeline import ConversionOutcome, convert_text, convert_value
from converttemp.core.preferred_unit import detect_preferred_unit, region_of
from converttemp.core.units import TemperatureUnit, symbol
from converttemp.models.schemas import (
    ConvertRequest,
    ConvertResponse,
    ParseRequest,
    ReadingResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["convert"])


def resolve_default_unit(code: str | None, accept_language: str | None) -> TemperatureUnit:
    """Explicit request unit, else the client's locale, else the configured default."""
    if code is not None:
        return TemperatureUnit.parse_code(code)
    if region_of(accept_language) is not None:
        return detect_preferred_unit(accept_language)
    return settings.default_unit


def _error_detail(error: ParseError | OutOfRangeError) -> list[dict]:
    if isinstance(error, ParseError):
        return [{"message": error.message, "code": "parse_error", "token": error.token}]
    return [{
        "message": error.message,
        "code": "out_of_range",
        "unit": error.unit.value,
        "bound": error.bound.value,
        "limit": error.limit,
    }]


def _reading_response(reading: Reading) -> ReadingResponse:
    return ReadingResponse(
        value=reading.value,
        unit=reading.unit.value,
        symbol=symbol(reading.unit),
        explicit=reading.explicit,
    )


@router.post("/parse", response_model=ReadingResponse)
async def parse_input(req: ParseRequest, accept_language: str | None = Header(default=None)):
    """Parse smart input without converting it."""
    default_unit = resolve_default_unit(req.default_unit, accept_language)
    outcome = parse(req.text, default_unit)
    if not outcome.ok:
        logger.debug("Rejected input %r: %s", req.text, outcome.error.message)
        raise HTTPException(status_code=422, detail=_error_detail(outcome.error))
    return _reading_response(outcome.reading)


@router.post("/convert", response_model=ConvertResponse)
async def convert_input(req: ConvertRequest, accept_language: str | None = Header(default=None)):
    """Convert smart input or a numeric reading to every supported unit."""
    outcome: ConversionOutcome
    if req.text is not None:
        default_unit = resolve_default_unit(req.default_unit, accept_language)
        outcome = convert_text(req.text, default_unit, settings.upper_bound)
    else:
        outcome = convert_value(req.value, TemperatureUnit.parse_code(req.unit), settings.upper_bound)

    if not outcome.ok:
        logger.debug("Conversion rejected: %s", outcome.error.message)
        raise HTTPException(status_code=422, detail=_error_detail(outcome.error))

    result = outcome.result
    return ConvertResponse(
        input=_reading_response(outcome.reading),
        celsius=result.celsius_value,
        values={u.value: v for u, v in result.values.items()},
        formatted={u.value: s for u, s in result.formatted.items()},
    )
