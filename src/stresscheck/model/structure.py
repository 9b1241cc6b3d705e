from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Optional, Union

from stresscheck.core.catalogue import DEFAULT_MATERIAL
from stresscheck.core.material import Material
from stresscheck.model.component import (
    Component,
    ComponentId,
    Dimensions,
    Number,
    Position,
    default_dimensions,
)

if TYPE_CHECKING:
    from stresscheck.analysis.settings import AnalysisSettings
    from stresscheck.loads.load import Load
    from stresscheck.results.analysis_result import AnalysisResult


@dataclass
class Structure:
    """
    User-facing scene model: the components placed so far and the loads on them.

    Owns the create/update/delete lifecycle. Components keep insertion order.
    Removing a component leaves its loads in place; they become inert.
    """

    components: Dict[ComponentId, Component] = field(default_factory=dict)
    loads: Dict[str, "Load"] = field(default_factory=dict)
    _ids: Iterator[int] = field(default_factory=lambda: itertools.count(1), init=False, repr=False, compare=False)

    def add_component(self, component: Component) -> Component:
        if not isinstance(component, Component):
            raise TypeError("component must be a Component")
        if component.id in self.components:
            raise ValueError(f"component {component.id} already exists")
        self._validate_dimensions(component)
        self.components[component.id] = component
        return component

    def place(
        self,
        component_type: str,
        position: Union[Position, Iterable[Number]] = (0.0, 0.0, 0.0),
        material: Material = DEFAULT_MATERIAL,
        dimensions: Optional[Union[Dimensions, Iterable[Number]]] = None,
        id: Optional[ComponentId] = None,
    ) -> Component:
        """Create a component with placement defaults and add it."""
        component = Component(
            id=id if id is not None else self._next_id(),
            type=component_type,  # type: ignore[arg-type]
            material=material,
            dimensions=dimensions if dimensions is not None else default_dimensions(component_type),  # type: ignore[arg-type]
            position=position,  # type: ignore[arg-type]
        )
        return self.add_component(component)

    def update_component(self, component_id: ComponentId, **changes: Any) -> Component:
        current = self.component(component_id)
        updated = current.updated(**changes)
        self._validate_dimensions(updated)
        self.components[component_id] = updated
        return updated

    def remove_component(self, component_id: ComponentId) -> None:
        if component_id not in self.components:
            raise KeyError(f"component {component_id} not found")
        self.components.pop(component_id)

    def component(self, component_id: ComponentId) -> Component:
        if component_id not in self.components:
            raise KeyError(f"component {component_id} not found")
        return self.components[component_id]

    def add_load(self, load: "Load") -> "Load":
        from stresscheck.loads.load import Load  # local import to avoid cycle

        if not isinstance(load, Load):
            raise TypeError("load must be a Load")
        if load.id in self.loads:
            raise ValueError(f"load {load.id} already exists")
        self.loads[load.id] = load
        return load

    def remove_load(self, load_id: str) -> None:
        if load_id not in self.loads:
            raise KeyError(f"load {load_id} not found")
        self.loads.pop(load_id)

    def loads_on(self, component_id: ComponentId) -> List["Load"]:
        return [load for load in self.loads.values() if load.component_id == component_id]

    def analyze(self, settings: Optional["AnalysisSettings"] = None) -> "AnalysisResult":
        from stresscheck.analysis.engine import analyze

        return analyze(list(self.components.values()), list(self.loads.values()), settings)

    def plot(self, result: Optional["AnalysisResult"] = None, save_path: Optional[str] = None) -> None:
        from stresscheck.viz.plot_structure import plot_structure

        plot_structure(list(self.components.values()), result=result, save_path=save_path)

    def _next_id(self) -> ComponentId:
        while True:
            candidate = f"comp-{next(self._ids)}"
            if candidate not in self.components:
                return candidate

    @staticmethod
    def _validate_dimensions(component: Component) -> None:
        if not component.dimensions.is_positive():
            raise ValueError(f"component {component.id}: length, width and height must be positive")
