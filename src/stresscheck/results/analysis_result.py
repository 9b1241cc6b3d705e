from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Literal, Tuple

from stresscheck.results.stress_data import StressData

Status = Literal["safe", "warning", "critical"]


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """
    Outcome of one analysis run.

    `stresses` follows the order of the analysed components. `total_load` is
    the externally applied load only (self-weight excluded).
    """

    stresses: Tuple[StressData, ...]
    max_deflection: float  # m
    total_load: float  # N
    timestamp: datetime
    status: Status

    def stress_for(self, component_id: str) -> StressData:
        for stress in self.stresses:
            if stress.component_id == component_id:
                return stress
        raise KeyError(f"stress result for {component_id} not found")

    @property
    def min_safety_factor(self) -> float:
        return min((s.safety_factor for s in self.stresses), default=math.inf)

    def components_at_risk(self, threshold: float = 1.5) -> List[StressData]:
        return [s for s in self.stresses if s.safety_factor < threshold]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stresses": [
                {
                    "component_id": s.component_id,
                    "max_stress": s.max_stress,
                    "min_stress": s.min_stress,
                    "avg_stress": s.avg_stress,
                    "stress_color": s.stress_color,
                    "safety_factor": s.safety_factor,
                }
                for s in self.stresses
            ],
            "max_deflection": self.max_deflection,
            "total_load": self.total_load,
            "timestamp": self.timestamp.isoformat(),
            "status": self.status,
        }
