#!/usr/bin/env python3

"""
Smoke test runner for the CleanLoop Forecast Engine API.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import argparse
import asyncio
import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List

import httpx

BASE_URL = os.getenv("CLEANLOOP_BASE_URL", "http://localhost:4323/api/v1")
HEADERS = {"Content-Type": "application/json"}


def monthly(values: List[float], start_year: int = 2024, start_month: int = 1) -> List[Dict[str, Any]]:
    rows = []
    year, month = start_year, start_month
    for v in values:
        rows.append({"period": f"{year}-{month:02d}", "value": v})
        month += 1
        if month > 12:
            month, year = 1, year + 1
    return rows


def yearly(values: List[float], start_year: int = 2020) -> List[Dict[str, Any]]:
    return [{"period": start_year + i, "value": v} for i, v in enumerate(values)]


REVENUE = [42000, 45500, 47100, 51000, 49800, 53200, 56100, 58900, 57400, 61000, 63800, 66200]
ORDERS = [310, 322, 341, 350, 347, 366, 381, 392, 388, 405, 417, 430]
CUSTOMERS = [48, 51, 50, 57, 61, 60, 66, 70, 69, 75, 79, 81]
SEASONAL = [100 + 4 * i + (25 if i % 12 in (4, 5, 6) else -8) for i in range(36)]


@dataclass(frozen=True)
class Case:
    label: str
    method: str
    path: str
    body: Dict[str, Any] = field(default_factory=dict)
    expect: int = 200
    section: str = ""


CASES: list[Case] = [
    # ── Health ────────────────────────────────────────────
    Case("health", "GET", "/health", section="Health"),

    # ── Forecast ──────────────────────────────────────────
    Case("monthly revenue", "POST", "/forecast", section="Forecast",
         body={"data": monthly(REVENUE), "horizon": 6}),
    Case("seasonal 36 months", "POST", "/forecast", section="Forecast",
         body={"data": monthly(SEASONAL), "horizon": 12}),
    Case("yearly revenue", "POST", "/forecast", section="Forecast",
         body={"data": yearly([510000, 604000, 688000, 742000]), "horizon": 3}),
    Case("too short", "POST", "/forecast", section="Forecast",
         body={"data": monthly([10, 20])}),
    Case("batch", "POST", "/forecast/batch", section="Forecast",
         body={"datasets": {"revenue": monthly(REVENUE), "orders": monthly(ORDERS)}, "horizon": 6}),

    # ── Predictions ───────────────────────────────────────
    Case("dashboard bundle", "POST", "/predictions", section="Predictions", body={
        "monthly": {
            "revenue": monthly(REVENUE),
            "orders": monthly(ORDERS),
            "customers": monthly(CUSTOMERS),
        },
        "yearly": {"revenue": yearly([510000, 604000, 688000, 742000])},
    }),

    # ── Validation ────────────────────────────────────────
    Case("mixed cadence", "POST", "/forecast", section="Validation",
         body={"data": [{"period": "2024", "value": 1}, {"period": "2024-02", "value": 2}]}, expect=422),
    Case("bad month", "POST", "/forecast", section="Validation",
         body={"data": [{"period": "2024-13", "value": 1}]}, expect=422),
    Case("negative value", "POST", "/forecast", section="Validation",
         body={"data": [{"period": "2024-01", "value": -5}]}, expect=422),
    Case("horizon too large", "POST", "/forecast", section="Validation",
         body={"data": monthly(REVENUE), "horizon": 100}, expect=422),
]


async def run_case(client: httpx.AsyncClient, case: Case) -> tuple[bool, str, Any]:
    try:
        if case.method == "GET":
            r = await client.get(case.path)
        else:
            r = await client.request(case.method, case.path, json=case.body or None)
    except httpx.TransportError as exc:
        return False, f"transport error: {exc}", None
    try:
        body: Any = r.json()
    except ValueError:
        body = r.text
    if r.status_code == case.expect:
        return True, "", body
    return False, f"{r.status_code} {r.reason_phrase}: {body}", body


async def main() -> None:
    parser = argparse.ArgumentParser(description="Run API smoke cases")
    parser.add_argument("--section", help="only run cases from this section name")
    args = parser.parse_args()
    selected = [c for c in CASES if not args.section or c.section == args.section]
    if not selected:
        print("no matching cases (check --section)")
        sys.exit(1)

    passed = failed = 0
    current_section = ""

    async with httpx.AsyncClient(base_url=BASE_URL, headers=HEADERS, timeout=30) as client:
        for case in selected:
            if case.section != current_section:
                current_section = case.section
                print(f"\n── {current_section} {'─' * max(0, 44 - len(current_section))}")

            ok, detail, body = await run_case(client, case)
            pretty = json.dumps(body, indent=2) if isinstance(body, (dict, list)) else str(body)
            if ok:
                passed += 1
                print(f"  ✓ PASS  {case.method} {case.path} — {case.label}")
                print(f"         response:\n{pretty}")
            else:
                failed += 1
                print(f"  ✗ FAIL  {case.method} {case.path} — {case.label} (expected {case.expect})")
                print(f"         {detail}")

    total = passed + failed
    print(f"\n{'━' * 43}")
    print(f"  Results: {passed} passed / {failed} failed / {total} total")
    print(f"{'━' * 43}\n")
    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
