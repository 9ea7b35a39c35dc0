"""
Enumerations for series cadence and trend classification.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class Cadence(str, Enum):
    monthly = "monthly"
    yearly = "yearly"

    @classmethod
    def infer(cls, label: str) -> Cadence:
        # "2024" is yearly, "2024-03" is monthly; resolve once per series
        # and pass the result along rather than re-sniffing labels.
        label = str(label).strip()
        if "-" not in label or len(label) == 4:
            return cls.yearly
        return cls.monthly


class Trend(str, Enum):
    growing = "growing"
    declining = "declining"
    stable = "stable"
