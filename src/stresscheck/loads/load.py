from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Literal, Optional, Tuple, Union

from stresscheck.model.component import Component, ComponentId, Position

LoadType = Literal["point", "distributed", "moment"]
Direction = Literal["x", "y", "z"]

LOAD_TYPES: Tuple[str, ...] = ("point", "distributed", "moment")
DIRECTIONS: Tuple[str, ...] = ("x", "y", "z")


@dataclass(frozen=True, slots=True)
class Load:
    """
    An external action attached to one component.

    `magnitude` is N for point loads, N/m for distributed loads and N*m for
    moments. Only its absolute value enters the force sums; `direction` is
    carried for display and does not change the magnitude math.
    """

    id: str
    component_id: ComponentId
    type: LoadType
    magnitude: float
    direction: Direction = "y"
    position: Optional[Position] = None

    def __post_init__(self) -> None:
        if self.type not in LOAD_TYPES:
            raise ValueError("type must be 'point', 'distributed', or 'moment'")
        if self.direction not in DIRECTIONS:
            raise ValueError("direction must be 'x', 'y', or 'z'")
        magnitude = float(self.magnitude)
        if not math.isfinite(magnitude):
            raise ValueError("magnitude must be a finite number")
        object.__setattr__(self, "magnitude", magnitude)
        if self.position is not None:
            object.__setattr__(self, "position", Position.coerce(self.position))

    def force_on(self, component: Component) -> float:
        """Resultant force (N) this load applies to `component`; moments give 0."""
        if self.type == "point":
            return abs(self.magnitude)
        if self.type == "distributed":
            return abs(self.magnitude) * component.length
        return 0.0

    def applies_to(self, component: Component) -> bool:
        return self.component_id == component.id


def loads_on(loads: Iterable[Load], component_id: Union[ComponentId, Component]) -> Tuple[Load, ...]:
    key = component_id.id if isinstance(component_id, Component) else component_id
    return tuple(load for load in loads if load.component_id == key)
