"""
Per-component stress check.

Each component is treated on its own: applied loads plus self-weight give one
resultant force, which produces an axial (average) stress over the cross
section and, for beams and columns, a bending stress from that force acting
at mid-length. Stresses are in MPa, forces in N, geometry in meters.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from stresscheck.analysis.settings import AnalysisSettings
from stresscheck.loads.load import Load
from stresscheck.model.component import Component
from stresscheck.results.stress_data import GREEN, ORANGE, RED, YELLOW, StressData

PA_PER_MPA = 1e6


def applied_force(component: Component, loads: Iterable[Load]) -> float:
    return float(sum(load.force_on(component) for load in loads if load.applies_to(component)))


def self_weight(component: Component, gravity: float) -> float:
    return component.volume * component.material.density * gravity


def bending_stress(component: Component, total_force: float) -> float:
    """Extreme-fiber bending stress (MPa); zero for walls and supports."""
    if not component.carries_bending:
        return 0.0
    moment = total_force * component.length / 2.0
    c = component.dimensions.height / 2.0
    return _to_mpa(moment * c, component.second_moment)


def safety_factor(yield_strength: float, max_stress: float) -> float:
    # zero stress never governs: report an unbounded margin
    if max_stress <= 0.0:
        return math.inf
    return max(0.0, yield_strength / max_stress)


def stress_color(factor: float, settings: Optional[AnalysisSettings] = None) -> str:
    chosen = settings or AnalysisSettings()
    if factor < chosen.critical_threshold:
        return RED
    if factor < chosen.warning_threshold:
        return ORANGE
    if factor < chosen.caution_threshold:
        return YELLOW
    return GREEN


def component_stress(
    component: Component,
    loads: Iterable[Load],
    settings: Optional[AnalysisSettings] = None,
) -> StressData:
    chosen = settings or AnalysisSettings()

    total_force = applied_force(component, loads) + self_weight(component, chosen.gravity)
    avg_stress = _to_mpa(total_force, component.area)
    sigma_b = abs(bending_stress(component, total_force))

    max_stress = avg_stress + sigma_b
    # an unbounded bending term leaves nothing to subtract from
    min_stress = 0.0 if math.isinf(sigma_b) else avg_stress - sigma_b
    max_stress = max(0.0, max_stress)
    min_stress = max(0.0, min_stress)

    factor = safety_factor(component.material.yield_strength, max_stress)
    return StressData(
        component_id=component.id,
        max_stress=max_stress,
        min_stress=min_stress,
        avg_stress=max(0.0, avg_stress),
        stress_color=stress_color(factor, chosen),
        safety_factor=factor,
    )


def _to_mpa(numerator: float, denominator: float) -> float:
    # degenerate section: any demand is unbounded, no demand is zero
    if denominator <= 0.0:
        return math.inf if numerator > 0.0 else 0.0
    return numerator / (denominator * PA_PER_MPA)
