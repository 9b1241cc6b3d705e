from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Material:
    name: str
    elasticity: float  # Young's modulus (MPa)
    density: float  # kg/m^3
    yield_strength: float  # MPa
    color: str = "#6c757d"  # display color (hex)

    def __post_init__(self) -> None:
        for label in ("elasticity", "density", "yield_strength"):
            value = float(getattr(self, label))
            if not math.isfinite(value):
                raise ValueError(f"{label} must be a finite number")
            object.__setattr__(self, label, value)
        if self.elasticity <= 0.0:
            raise ValueError("elasticity must be positive")
        if self.density < 0.0:
            raise ValueError("density cannot be negative")
        if self.yield_strength < 0.0:
            raise ValueError("yield_strength cannot be negative")
