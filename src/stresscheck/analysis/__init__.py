from __future__ import annotations

from stresscheck.analysis.engine import analyze, utc_now
from stresscheck.analysis.settings import STANDARD_GRAVITY, AnalysisSettings
from stresscheck.analysis.stress import component_stress, safety_factor, stress_color
from stresscheck.analysis.summary import (
    classify_status,
    component_deflection,
    max_deflection,
    total_applied_load,
)

__all__ = [
    "analyze",
    "utc_now",
    "AnalysisSettings",
    "STANDARD_GRAVITY",
    "component_stress",
    "safety_factor",
    "stress_color",
    "classify_status",
    "component_deflection",
    "max_deflection",
    "total_applied_load",
]
