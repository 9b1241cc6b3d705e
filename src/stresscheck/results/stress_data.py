from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal

StressLevel = Literal["critical", "high", "medium", "low"]

RED = "#dc3545"
ORANGE = "#ff9800"
YELLOW = "#ffc107"
GREEN = "#28a745"

STRESS_LEVELS: Dict[str, StressLevel] = {
    RED: "critical",
    ORANGE: "high",
    YELLOW: "medium",
    GREEN: "low",
}


@dataclass(frozen=True, slots=True)
class StressData:
    component_id: str
    max_stress: float  # MPa
    min_stress: float  # MPa
    avg_stress: float  # MPa
    stress_color: str
    safety_factor: float

    @property
    def level(self) -> StressLevel:
        return STRESS_LEVELS[self.stress_color]
