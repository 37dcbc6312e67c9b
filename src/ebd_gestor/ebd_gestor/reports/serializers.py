from __future__ import annotations

from dataclasses import asdict
from decimal import Decimal
from typing import Any

from .aggregation import frequency_band
from .model import ClassReportRow, StudentRankRow, TrendPoint


def money(value: Decimal) -> float:
    return float(value.quantize(Decimal("0.01")))


def class_row_to_dict(row: ClassReportRow) -> dict[str, Any]:
    out = asdict(row)
    out["total_offerings"] = money(row.total_offerings)
    out["total_pv"] = row.total_pv
    out["percentage"] = round(row.percentage, 2)
    out["avg_attendance"] = round(row.avg_attendance, 2)
    out["band"] = frequency_band(row.percentage).value
    return out


def student_row_to_dict(row: StudentRankRow) -> dict[str, Any]:
    out = asdict(row)
    out["percentage"] = round(row.percentage, 2)
    out["band"] = frequency_band(row.percentage).value
    return out


def trend_point_to_dict(point: TrendPoint) -> dict[str, Any]:
    out: dict[str, Any] = {"label": point.label, "value": point.value}
    if point.visitors is not None:
        out["visitors"] = point.visitors
    return out
