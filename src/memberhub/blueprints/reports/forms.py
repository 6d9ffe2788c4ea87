"""Query-string models for the report endpoints."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...services.dates import parse_report_date, report_window


def structured_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by offending field."""

    structured: dict[str, list[str]] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        key = str(loc[0]) if loc else "__root__"
        structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return structured


class GraduationQuery(BaseModel):
    """``divisionId`` plus a ``dd/MM/yyyy`` window, both ends inclusive."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    division_id: int = Field(alias="divisionId")
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")

    @field_validator("start_date", "end_date")
    @classmethod
    def validate_report_date(cls, value: str) -> str:
        parse_report_date(value)
        return value

    def window(self) -> tuple[datetime, datetime]:
        return report_window(self.start_date, self.end_date)


class DivisionReportQuery(BaseModel):
    """Optional regional filter and ISO date bounds for the social-action listing."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    regional_id: Optional[int] = Field(default=None, alias="regionalId")
    start_date: Optional[date] = Field(default=None, alias="startDate")
    end_date: Optional[date] = Field(default=None, alias="endDate")

    @field_validator("regional_id", "start_date", "end_date", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def bounds(self) -> tuple[Optional[datetime], Optional[datetime]]:
        start = datetime.combine(self.start_date, time.min) if self.start_date else None
        end = datetime.combine(self.end_date, time.max) if self.end_date else None
        return start, end


def _whole_days(start: date, end: date) -> tuple[datetime, datetime]:
    return datetime.combine(start, time.min), datetime.combine(end, time.max)


class RegionalChartQuery(BaseModel):
    """Required ``regionalId`` and ISO ``startDate``/``endDate`` for the regional charts."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    regional_id: int = Field(alias="regionalId")
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")

    def bounds(self) -> tuple[datetime, datetime]:
        return _whole_days(self.start_date, self.end_date)


class ParticipationChartQuery(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    division_id: int = Field(alias="divisionId")
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")

    def bounds(self) -> tuple[datetime, datetime]:
        return _whole_days(self.start_date, self.end_date)


__all__ = [
    "DivisionReportQuery",
    "GraduationQuery",
    "ParticipationChartQuery",
    "RegionalChartQuery",
    "structured_errors",
]
