from stresscheck.model.component import (
    BENDING_TYPES,
    COMPONENT_TYPES,
    Component,
    ComponentType,
    Dimensions,
    Position,
    default_dimensions,
)
from stresscheck.model.structure import Structure

__all__ = [
    "Component",
    "ComponentType",
    "COMPONENT_TYPES",
    "BENDING_TYPES",
    "Dimensions",
    "Position",
    "Structure",
    "default_dimensions",
]
