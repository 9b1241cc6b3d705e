from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Literal, Tuple, Union, cast

from stresscheck.core.material import Material

ComponentType = Literal["beam", "column", "wall", "support"]
ComponentId = str
Number = Union[int, float]

COMPONENT_TYPES: Tuple[str, ...] = ("beam", "column", "wall", "support")
BENDING_TYPES: Tuple[str, ...] = ("beam", "column")


@dataclass(frozen=True, slots=True)
class Position:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        for label in ("x", "y", "z"):
            value = float(getattr(self, label))
            if value != value:  # NaN check
                raise ValueError(f"{label} must be a real number")
            object.__setattr__(self, label, value)

    @classmethod
    def coerce(cls, value: Union["Position", Iterable[Number]]) -> "Position":
        if isinstance(value, Position):
            return value
        coords = tuple(float(item) for item in value)
        if len(coords) != 3:
            raise ValueError("position must contain exactly 3 coordinates")
        return cls(*coords)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class Dimensions:
    """Bounding dimensions of a component in meters (length along its long axis)."""

    length: float
    width: float
    height: float

    def __post_init__(self) -> None:
        for label in ("length", "width", "height"):
            value = float(getattr(self, label))
            if not math.isfinite(value):
                raise ValueError(f"{label} must be a finite number")
            if value < 0.0:
                raise ValueError(f"{label} cannot be negative")
            object.__setattr__(self, label, value)

    @classmethod
    def coerce(cls, value: Union["Dimensions", Iterable[Number]]) -> "Dimensions":
        if isinstance(value, Dimensions):
            return value
        dims = tuple(float(item) for item in value)
        if len(dims) != 3:
            raise ValueError("dimensions must contain length, width and height")
        return cls(*dims)

    def is_positive(self) -> bool:
        return self.length > 0.0 and self.width > 0.0 and self.height > 0.0


_DEFAULT_DIMENSIONS: Dict[str, Dimensions] = {
    "beam": Dimensions(length=3.0, width=0.3, height=0.3),
    "column": Dimensions(length=1.0, width=0.3, height=3.0),
    "wall": Dimensions(length=1.0, width=0.2, height=3.0),
    "support": Dimensions(length=1.0, width=0.3, height=0.3),
}


def default_dimensions(component_type: str) -> Dimensions:
    """Dimensions given to a freshly placed component of `component_type`."""
    validate_component_type(component_type)
    return _DEFAULT_DIMENSIONS[component_type]


def validate_component_type(component_type: str) -> None:
    if component_type not in COMPONENT_TYPES:
        raise ValueError("type must be 'beam', 'column', 'wall', or 'support'")


@dataclass(frozen=True, slots=True)
class Component:
    """
    A single structural element placed in the scene.

    Immutable: edits go through `updated(...)`, which returns a new instance.
    The material is shared reference data, never owned by the component.
    """

    id: ComponentId
    type: ComponentType
    material: Material
    dimensions: Dimensions
    position: Position = Position()

    def __post_init__(self) -> None:
        validate_component_type(self.type)
        if not isinstance(self.material, Material):
            raise TypeError("material must be a Material")
        object.__setattr__(self, "position", Position.coerce(self.position))
        object.__setattr__(self, "dimensions", Dimensions.coerce(self.dimensions))

    @property
    def length(self) -> float:
        return self.dimensions.length

    @property
    def area(self) -> float:
        """Cross-section area perpendicular to the long axis (m^2)."""
        return self.dimensions.width * self.dimensions.height

    @property
    def volume(self) -> float:
        return self.dimensions.length * self.dimensions.width * self.dimensions.height

    @property
    def second_moment(self) -> float:
        """Second moment of area about the bending axis (m^4)."""
        return self.dimensions.width * self.dimensions.height ** 3 / 12.0

    @property
    def carries_bending(self) -> bool:
        return self.type in BENDING_TYPES

    def updated(self, **changes: Any) -> "Component":
        for frozen in ("id", "type"):
            if frozen in changes and changes[frozen] != getattr(self, frozen):
                raise ValueError(f"component {frozen} cannot be changed after creation")
        return cast(Component, dataclasses.replace(self, **changes))
