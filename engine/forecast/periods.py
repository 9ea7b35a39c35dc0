"""
Calendar label generation for forecast points at monthly ("YYYY-MM") or yearly ("YYYY") cadence.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Tuple, Union

from engine.enums import Cadence
from engine.forecast.exceptions import InvalidPeriodLabel


def _parse_month(label: str) -> Tuple[int, int]:
    parts = str(label).strip().split("-")
    if len(parts) != 2:
        raise InvalidPeriodLabel(f"expected YYYY-MM, got {label!r}")
    try:
        year, month = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise InvalidPeriodLabel(f"expected YYYY-MM, got {label!r}") from exc
    if not 1 <= month <= 12:
        raise InvalidPeriodLabel(f"month out of range in {label!r}")
    return year, month


def _parse_year(label: Union[str, int]) -> int:
    try:
        return int(str(label).strip())
    except ValueError as exc:
        raise InvalidPeriodLabel(f"expected YYYY, got {label!r}") from exc


def generate_future_months(last_period: str, count: int) -> List[str]:
    year, month = _parse_month(last_period)
    labels: List[str] = []
    for _ in range(count):
        month += 1
        if month > 12:
            month = 1
            year += 1
        labels.append(f"{year}-{month:02d}")
    return labels


def generate_future_years(last_period: Union[str, int], count: int) -> List[str]:
    year = _parse_year(last_period)
    return [str(year + i + 1) for i in range(count)]


def future_periods(last_period: str, count: int, cadence: Cadence = Cadence.monthly) -> List[str]:
    if cadence == Cadence.yearly:
        return generate_future_years(last_period, count)
    return generate_future_months(last_period, count)
