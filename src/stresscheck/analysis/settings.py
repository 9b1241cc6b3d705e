from __future__ import annotations

from dataclasses import dataclass

STANDARD_GRAVITY = 9.81  # m/s^2


@dataclass
class AnalysisSettings:
    gravity: float = STANDARD_GRAVITY
    critical_threshold: float = 1.0
    warning_threshold: float = 1.5
    caution_threshold: float = 2.0
    verbose: bool = False

    def validate(self) -> None:
        if self.gravity <= 0.0:
            raise ValueError("gravity must be positive")
        if self.critical_threshold <= 0.0:
            raise ValueError("critical_threshold must be positive")
        if not (self.critical_threshold < self.warning_threshold < self.caution_threshold):
            raise ValueError("thresholds must satisfy critical < warning < caution")
