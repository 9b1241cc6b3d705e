from __future__ import annotations

from typing import Dict, Optional, Sequence

from stresscheck.analysis.settings import AnalysisSettings
from stresscheck.analysis.stress import PA_PER_MPA
from stresscheck.loads.load import Load
from stresscheck.model.component import Component
from stresscheck.results.analysis_result import Status
from stresscheck.results.stress_data import StressData


def component_deflection(component: Component, stress: StressData) -> float:
    """
    Tip deflection estimate delta = F L^3 / (3 E I).

    F is recovered from the average stress over the cross section. The same
    formula is used for every component type.
    """
    area = component.area
    inertia = component.second_moment
    if area <= 0.0 or inertia <= 0.0:
        return 0.0
    force = stress.avg_stress * PA_PER_MPA * area
    elasticity = component.material.elasticity * PA_PER_MPA
    return force * component.length ** 3 / (3.0 * elasticity * inertia)


def max_deflection(components: Sequence[Component], stresses: Sequence[StressData]) -> float:
    """Largest deflection; `stresses[i]` belongs to `components[i]`."""
    return max(
        (component_deflection(component, stress) for component, stress in zip(components, stresses)),
        default=0.0,
    )


def total_applied_load(components: Sequence[Component], loads: Sequence[Load]) -> float:
    """Sum of externally applied load (N); self-weight is not included."""
    by_id: Dict[str, Component] = {component.id: component for component in components}
    total = 0.0
    for load in loads:
        if load.type == "point":
            total += abs(load.magnitude)
        elif load.type == "distributed" and load.component_id in by_id:
            total += load.force_on(by_id[load.component_id])
    return total


def classify_status(stresses: Sequence[StressData], settings: Optional[AnalysisSettings] = None) -> Status:
    chosen = settings or AnalysisSettings()
    if not stresses:
        return "safe"
    minimum = min(stress.safety_factor for stress in stresses)
    if minimum < chosen.critical_threshold:
        return "critical"
    if minimum < chosen.warning_threshold:
        return "warning"
    return "safe"
